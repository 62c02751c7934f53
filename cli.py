"""Command line entry point for the facade demonstration.

Usage:
    facade-demo                     # run both demo scenarios
    facade-demo demo -v             # same, with library logs on stderr
    facade-demo demo --log-level DEBUG
    facade-demo log-level           # print the configured log level
    facade-demo log-level DEBUG     # set log level in settings.toml
"""

import argparse
import logging
import re
import sys

from settings_service import SETTINGS_PATH, VALID_LOG_LEVELS, _load_settings, clear_settings_cache


def client_code(facade) -> None:
    """Client code only sees the facade's single operation."""
    print(facade.operation(), end="")


def run_demo(logger: logging.Logger | None = None) -> None:
    """Run the two scenarios: supplied subsystems, then facade-created ones."""
    from facades import get_subsystem_facade
    from services import SubsystemA, SubsystemB

    # Scenario 1: the client already holds subsystems and hands them over
    subsystem_a = SubsystemA()
    subsystem_b = SubsystemB()
    with get_subsystem_facade(subsystem_a, subsystem_b, logger=logger) as facade:
        client_code(facade)

    print()

    # Scenario 2: the facade creates its own subsystems
    with get_subsystem_facade(logger=logger) as facade:
        client_code(facade)


def cmd_demo(args: argparse.Namespace) -> int:
    """Run the demo scenarios and print their output."""
    level = args.log_level or ("DEBUG" if args.verbose else None)
    quiet = level is None
    if quiet:
        # Suppress library logs before service imports set up handlers
        logging.disable(logging.INFO)

    logger = None
    if level is not None:
        from logging_config import setup_logging
        from services import subsystems

        logger = setup_logging("facade_demo", level=level)
        subsystems.logger.setLevel(level)

    try:
        run_demo(logger)
    finally:
        if quiet:
            logging.disable(logging.NOTSET)
    return 0


def cmd_log_level(args: argparse.Namespace) -> int:
    """Get or set the log level in settings.toml."""
    settings = _load_settings()
    current = settings["env"]["log_level"]

    if args.level is None:
        print(current)
        return 0

    level = args.level.upper()
    if level == current:
        print(f"already {level}")
        return 0

    content = SETTINGS_PATH.read_text()
    updated = re.sub(
        r'(log_level\s*=\s*)"[^"]*"',
        rf'\1"{level}"',
        content,
    )
    SETTINGS_PATH.write_text(updated)
    clear_settings_cache()
    print(f"{current} → {level}")
    return 0


def _log_level_name(value: str) -> str:
    level = value.upper()
    if level not in VALID_LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"invalid level: {value} (expected one of {', '.join(VALID_LOG_LEVELS)})"
        )
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="facade-demo", description="Facade pattern demonstration")
    sub = parser.add_subparsers(dest="command")

    demo_parser = sub.add_parser("demo", help="Run the facade demo scenarios (default)")
    demo_parser.add_argument("-v", "--verbose", action="store_true", help="Show library logs on stderr")
    demo_parser.add_argument("--log-level", type=_log_level_name, default=None, help="Override the configured log level")

    ll_parser = sub.add_parser("log-level", help="Get or set the log level in settings.toml")
    ll_parser.add_argument("level", nargs="?", type=_log_level_name, default=None,
                           help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "log-level":
        return cmd_log_level(args)

    # No subcommand runs the demo with defaults
    if args.command is None:
        args = argparse.Namespace(command="demo", verbose=False, log_level=None)
    return cmd_demo(args)


if __name__ == "__main__":
    sys.exit(main())
