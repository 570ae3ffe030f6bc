import argparse
import importlib.metadata
from collections.abc import Sequence
from typing import Optional

import attr

from assoclist import logconfig
from assoclist.demo import run_demo


def _add_logging_arg_group(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("logging options")
    group.add_argument(
        "--enable-logger",
        action="store_true",
        default=None,
        help=(
            "write assoclist log records to stderr "
            f"(env: {logconfig.ENABLE_ENV_VAR}; default: false)"
        ),
    )
    group.add_argument(
        "-l",
        "--log-level",
        type=str.upper,
        choices=logconfig.LEVELS,
        help=(
            "the logging level for assoclist; TRACE records every insert and removal "
            f"(env: {logconfig.LEVEL_ENV_VAR}; default: WARNING)"
        ),
    )


def _logging_settings(args: argparse.Namespace) -> logconfig.LoggingSettings:
    """Settings from the environment, overridden by any logging flags given."""
    settings = logconfig.LoggingSettings.from_env()
    if args.log_level is not None:
        settings = attr.evolve(settings, level=args.log_level)
    if args.enable_logger:
        settings = attr.evolve(settings, enabled=True)
    return settings


def demo(_, args: argparse.Namespace) -> None:
    logconfig.configure_logger(_logging_settings(args))
    run_demo()
    print("All checks passed.")


def version(_, __) -> None:
    v = importlib.metadata.version("assoclist")
    print(f"assoclist {v}")


def invoke_cli(args: Optional[Sequence[str]] = None) -> None:
    """Entrypoint to run the assoclist CLI."""
    parser = argparse.ArgumentParser(
        description="assoclist is a key/value list searched by key equality."
    )

    subparsers = parser.add_subparsers(help="sub-commands")

    demo_parser = subparsers.add_parser(
        "demo",
        help="run the associative list demonstration",
        description=(
            "Insert, look up and remove a handful of entries, checking the outcome "
            "of every operation. Exits with a traceback on the first failed check."
        ),
    )
    demo_parser.set_defaults(handler=demo)
    _add_logging_arg_group(demo_parser)

    version_parser = subparsers.add_parser(
        "version", help="print the version of assoclist"
    )
    version_parser.set_defaults(handler=version)

    parsed_args = parser.parse_args(args=args)
    if hasattr(parsed_args, "handler"):
        parsed_args.handler(parser, parsed_args)
    else:
        parser.print_help()


if __name__ == "__main__":
    invoke_cli()
