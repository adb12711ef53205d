"""CLI entry point for datagenerator."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Sequence

from datagenerator.config.generation import GenerationConfiguration, build_configuration
from datagenerator.config.loader import DEFAULT_CONFIG_PATH, load_config
from datagenerator.config.schema import VALID_LOG_LEVELS, AppConfig
from datagenerator.core.errors import ConfigError, DataGeneratorError
from datagenerator.core.logging import configure_logging, get_logger
from datagenerator.generator import GenerationLoop
from datagenerator.sinks import open_sink


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datagenerator",
        description="Repeat a unit of bytes with an optional delimiter between repetitions.",
    )

    inputs = parser.add_mutually_exclusive_group(required=True)
    inputs.add_argument("-f", "--file", type=str, default=None, help="data from file ('-' is stdin)")
    inputs.add_argument(
        "-x",
        "--hex",
        dest="hex_text",
        type=str,
        default=None,
        help="data from hex string ('0x' must not be added)",
    )
    inputs.add_argument("-b", "--base64", dest="base64_text", type=str, default=None, help="data from base64 string")
    inputs.add_argument("-t", "--string", type=str, default=None, help="data from utf-8 string")
    inputs.add_argument("-r", "--random", action="store_true", help="non-cryptographic random data, one byte per repeat")
    inputs.add_argument(
        "-i",
        "--stdin",
        type=str,
        default=None,
        metavar="MAX_LENGTH",
        help="data from at most MAX_LENGTH bytes of stdin",
    )

    parser.add_argument("-o", "--output", type=Path, default=None, help="data destination (default is stdout)")
    parser.add_argument(
        "-s",
        "--delimiter",
        "--separator",
        dest="delimiter",
        type=str,
        default=None,
        help="delimiter hex string inserted between repeats (default is empty)",
    )
    parser.add_argument("-c", "--count", type=str, required=True, help="repeat count")
    parser.add_argument("--seed", type=str, default=None, help="seed for --random")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="logging config file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        default=None,
        help="override the configured log level",
    )
    return parser


def _load_app_config(config_path: Path, log_level: str | None) -> AppConfig:
    config = load_config(config_path)
    if log_level:
        config.logging = replace(config.logging, level=log_level)
    return config


def _print_error(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)


def cmd_generate(config: GenerationConfiguration) -> int:
    loop = GenerationLoop()
    with open_sink(config.output) as sink:
        loop.run(config.source, sink, config.delimiter, config.count)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_config = _load_app_config(args.config, args.log_level)
    except ConfigError as exc:
        _print_error(f"failed to load config: {exc}")
        return 1
    try:
        configure_logging(app_config.logging, force=True)
    except OSError as exc:
        _print_error(f"failed to configure logging: {exc}")
        return 1
    logger = get_logger("datagenerator.cli")

    try:
        generation = build_configuration(
            count=args.count,
            delimiter=args.delimiter,
            output=args.output,
            file=args.file,
            hex_text=args.hex_text,
            base64_text=args.base64_text,
            string=args.string,
            random=args.random,
            stdin=args.stdin,
            seed=args.seed,
        )
        return cmd_generate(generation)
    except (DataGeneratorError, OSError) as exc:
        logger.error(
            str(exc),
            extra={
                "event_action": "generation_failed",
                "event_outcome": "failure",
                "payload": {"error_type": type(exc).__name__},
            },
        )
        _print_error(str(exc))
        return 1
