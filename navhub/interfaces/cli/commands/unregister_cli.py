"""
Unregister command: remove a module's routes.
"""

from __future__ import annotations

import argparse

from navhub.app import build_application
from navhub.interfaces.cli.cli_ui import print_success, print_warning


def cmd_unregister(args: argparse.Namespace) -> int:
    application = build_application()
    service = application.get_service("routes")

    removed = service.unregister_routes(args.module, args.route or None)
    if removed:
        print_success(f"Removed {removed} route(s) for {args.module}")
    else:
        print_warning(f"No matching routes registered for {args.module}")
    return 0
