"""Struct menu demo entry point.

Usage:
    structmenu-demo                              # Job application form
    structmenu-demo --config menu.yaml           # Custom menu settings
    structmenu-demo --debug --log-file app.log   # Debug logging to file
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path

from .app import edit_record
from .config import load_settings
from .errors import ConfigError, StructMenuError
from .logging_config import DEFAULT_LOG_FILENAME, configure_logging

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 3


@dataclass
class ApplicationForm:
    """Fields typical of a job application."""

    first_name: str = field(default="", metadata={"smname": "First Name"})
    last_name: str = field(default="", metadata={"smname": "Last Name"})
    email: str = ""
    phone_no: int = field(default=0, metadata={"smname": "Phone"})
    country: str = field(default="", metadata={"smname": "Country"})
    location: str = field(default="", metadata={"smname": "Location (City)"})
    can_travel: bool = field(
        default=False,
        metadata={"smname": "Travel", "smdes": "Can you travel for work?"},
    )
    blacklisted_field: str = ""


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="structmenu-demo",
        description="Fill in a job application through a struct menu.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with menu settings (default: config/structmenu.yaml)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help=".env file to load before reading the config (default: .env)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=Path("logs") / DEFAULT_LOG_FILENAME,
        help="Where to write logs",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the demo form.

    Returns:
        Process exit code.
    """
    args = _build_parser().parse_args(argv)
    configure_logging(log_file=args.log_file, debug=args.debug)

    try:
        settings = load_settings(args.config, args.env_file)
    except ConfigError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    if not settings.header_text:
        settings = settings.model_copy(update={"header_text": "Apply for this job: "})

    form = ApplicationForm()
    try:
        state = edit_record(form, ["blacklisted_field"], True, settings)
    except StructMenuError as e:
        logger.error("Menu failed: %s", e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    if state.cancelled:
        print("Canceled application.")
        return EXIT_SUCCESS

    for name, value in asdict(form).items():
        print(f"{name}: {value}")
    print("Thank you for applying!")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
