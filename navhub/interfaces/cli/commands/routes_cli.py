"""
Routes command: list registered routes.
"""

from __future__ import annotations

import argparse

from navhub.app import build_application
from navhub.interfaces.cli.cli_ui import console, print_warning, routes_table


def cmd_routes(args: argparse.Namespace) -> int:
    application = build_application()
    service = application.get_service("navigation")

    routes = service.get_navigation_routes(args.module)
    if not routes:
        print_warning("No routes registered" + (f" for {args.module}" if args.module else ""))
        return 0

    console.print(routes_table(routes))
    return 0
