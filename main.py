#!/usr/bin/env python3
"""
main.py  —  envx CLI
Usage:
  envx --var NAME                          # print NAME (must be set, non-blank)
  envx --var PORT --type int --default 80  # coerce, fall back to a default
  envx --var DEBUG --type boolean --boolean-strict
  envx --var TOKEN --pattern '/^[a-z0-9]{32}$/i'
  envx --var DB_URL --env-file .env --env-file ~/.config/app/.env
  envx --version

Exit codes:
  0  value printed
  1  validation failed, or no value resolved (prints "undefined")
  2  missing --var, or --help
"""

import argparse
import sys

from cli.get_cmd import EXIT_USAGE, cmd_get, print_usage
from cli.helpers import to_regex
from cli.version_cmd import cmd_version
from envx.logging_config import setup_logging

TYPE_CHOICES = ["string", "int", "integer", "number", "boolean"]


def build_parser() -> argparse.ArgumentParser:
    # --help is handled by hand: usage exits with status 2, not argparse's 0
    parser = argparse.ArgumentParser(prog="envx", add_help=False)
    parser.add_argument("--var", "--name", dest="var", default="",
                        help="Environment variable to resolve")
    parser.add_argument("--type", dest="type_name", choices=TYPE_CHOICES,
                        default=None, help="Coerce to this type")
    parser.add_argument("--pattern", default=None,
                        help="Regex the value must match (REGEX or /REGEX/flags)")
    parser.add_argument("--default", default=None,
                        help="Value to use when the variable is missing or blank")
    parser.add_argument("--boolean-strict", action="store_true",
                        help="Only accept true/false for booleans")
    parser.add_argument("--env-file", action="append", default=[],
                        dest="env_files", metavar="PATH",
                        help=".env file to load first (repeatable)")
    parser.add_argument("--config", default="", dest="config_path",
                        help="YAML file with envx defaults")
    parser.add_argument("--json", action="store_true",
                        help="Emit {\"name\": ..., \"value\": ...}")
    parser.add_argument("--log-level", default="WARNING",
                        help="Logging level (DEBUG/INFO/WARNING/ERROR)")
    parser.add_argument("--version", action="store_true",
                        help="Show version and exit")
    parser.add_argument("-h", "--help", action="store_true",
                        help="Show usage and exit")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    if args.version:
        cmd_version(json_output=args.json)
        sys.exit(0)

    if not args.var or args.help:
        print_usage()
        sys.exit(EXIT_USAGE)

    code = cmd_get(
        args.var,
        type_name=args.type_name,
        pattern=to_regex(args.pattern),
        default=args.default,
        boolean_strict=args.boolean_strict,
        env_files=args.env_files,
        config_path=args.config_path,
        json_output=args.json,
    )
    sys.exit(code)


if __name__ == "__main__":
    main()
