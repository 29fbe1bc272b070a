# --------------------------------------------------
# __main__.py
# --------------------------------------------------
# Command line entry point:
#
#   deploy-config                      dump every resolved binding
#   deploy-config get app port 50100   print one resolved value
#   deploy-config --config x.ini ...   skip discovery, read x.ini
#
# `get` is meant for shell build steps, e.g.:
#   docker build --build-arg APP_NAME=$(deploy-config get app name flask-echo) .
#
# Lookups never fail: exit status is 0 whatever the config state.
# --------------------------------------------------

import argparse
import os

from .config import initialize, print_all_configs, resolve
from .logging_utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deploy-config",
        description="Resolve deployment configuration (env > config.ini > default).",
    )
    parser.add_argument("--config", help="read this file instead of searching for config.ini")

    sub = parser.add_subparsers(dest="command")

    get = sub.add_parser("get", help="print a single resolved value")
    get.add_argument("section")
    get.add_argument("key")
    get.add_argument("default", nargs="?", default="")

    sub.add_parser("dump", help="print all precomputed settings (default)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(os.environ.get("LOG_LEVEL", "INFO"))
    initialize(config_file=args.config, force=args.config is not None)

    if args.command == "get":
        print(resolve(args.section, args.key, args.default))
    else:
        print_all_configs()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
