"""
Bootstrap command: create missing collections and indexes.
"""

from __future__ import annotations

import argparse

from arango.exceptions import ArangoError

from navhub.app import build_application
from navhub.helpers.logging_helper import sanitize_exception_message
from navhub.interfaces.cli.cli_ui import print_error, print_success, show_spinner


def cmd_bootstrap(args: argparse.Namespace) -> int:
    try:
        show_spinner("Ensuring schema...", build_application, bootstrap=True)
    except ArangoError as e:
        print_error(sanitize_exception_message(e, "Schema bootstrap failed; see log for details"))
        return 1
    print_success("Schema is up to date")
    return 0
