"""
Tree command: print the assembled navigation tree.
"""

from __future__ import annotations

import argparse

from navhub.app import build_application
from navhub.interfaces.cli.cli_ui import console, navigation_tree, print_warning


def cmd_tree(args: argparse.Namespace) -> int:
    application = build_application()
    service = application.get_service("navigation")

    roots = service.get_navigation_tree(args.tenant)
    if not roots:
        print_warning("No active navigation items")
        return 0

    label = f"Navigation (tenant {args.tenant})" if args.tenant else "Navigation"
    console.print(navigation_tree(roots, label=label))
    return 0
