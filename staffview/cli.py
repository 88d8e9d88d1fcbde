"""
Command-line interface for the employee directory viewer.

Notes
-----
The CLI is intentionally thin. It parses arguments, configures logging and
delegates to the engine (headless `list`) or the GUI (`gui`, the default).
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from employee_engine.api_client import EmployeeApiClient
from employee_engine.dispatch import InlineDispatcher
from employee_engine.presentation import error_notice, format_listing
from employee_engine.settings import load_client_settings
from employee_engine.view_state import EmployeesViewModel

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="staffview",
        description="Employee directory viewer",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging threshold (default: WARNING).",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Optional JSON settings file (base_url, endpoint_path, timeout_seconds).",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("gui", help="Open the employee list window (default)")
    sub.add_parser("list", help="Fetch the employee list and print one row per line")

    return parser


def _run_list(view_model: EmployeesViewModel) -> int:
    view_model.start_fetch()

    response = view_model.result.value
    if response is not None:
        print(format_listing(response))
        return 0

    error = view_model.error.value
    print(f"ERROR: {error_notice(error) if error is not None else 'fetch did not complete'}")
    return 2


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Parameters
    ----------
    argv:
        Optional argument vector. If None, argparse uses sys.argv.

    Returns
    -------
    int
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_client_settings(args.settings)

    if args.command == "list":
        view_model = EmployeesViewModel(EmployeeApiClient(settings), InlineDispatcher())
        try:
            return _run_list(view_model)
        finally:
            view_model.close()

    # Qt is only imported when a window is actually requested.
    from gui.app import main as gui_main

    return gui_main(settings)


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
