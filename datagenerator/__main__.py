from datagenerator.cli import main


raise SystemExit(main())
