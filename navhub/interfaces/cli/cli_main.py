#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from navhub.helpers.logging_helper import configure_logging
from navhub.interfaces.cli.commands.bootstrap_cli import cmd_bootstrap
from navhub.interfaces.cli.commands.issue_token_cli import cmd_issue_token
from navhub.interfaces.cli.commands.register_cli import cmd_register
from navhub.interfaces.cli.commands.routes_cli import cmd_routes
from navhub.interfaces.cli.commands.tree_cli import cmd_tree
from navhub.interfaces.cli.commands.unregister_cli import cmd_unregister


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="navhub",
        description="navhub - navigation hierarchy and module route registration",
        epilog="Examples:\n"
        "  navhub bootstrap                               # Create collections and indexes\n"
        "  navhub register modules/billing.yaml           # Register a module's routes\n"
        "  navhub unregister billing --route /admin/x     # Remove one route\n"
        "  navhub tree --tenant acme                      # Show a tenant's navigation tree\n"
        "  navhub issue-token deploy-bot --role system    # Mint an API token",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--log-level", default="WARNING", help="logging level for CLI output (default: WARNING)")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'navhub <command> --help' for command-specific help)",
    )

    s = sub.add_parser("register", help="Register a module's routes from a YAML manifest")
    s.add_argument("manifest", help="path to the manifest (module + routes)")
    s.add_argument("--module", help="override the manifest's module id")
    s.set_defaults(func=cmd_register)

    s = sub.add_parser("unregister", help="Remove a module's routes")
    s.add_argument("module", help="module id")
    s.add_argument("--route", action="append", help="only remove this route (repeatable)")
    s.set_defaults(func=cmd_unregister)

    s = sub.add_parser("tree", help="Print the navigation tree")
    s.add_argument("--tenant", help="restrict to one tenant's items")
    s.set_defaults(func=cmd_tree)

    s = sub.add_parser("routes", help="List registered routes")
    s.add_argument("--module", help="restrict to one module")
    s.set_defaults(func=cmd_routes)

    s = sub.add_parser("issue-token", help="Issue an API bearer token")
    s.add_argument("subject", help="who the token is for")
    s.add_argument("--role", action="append", help="role to grant, e.g. admin or system (repeatable)")
    s.set_defaults(func=cmd_issue_token)

    s = sub.add_parser("bootstrap", help="Create missing collections and indexes")
    s.set_defaults(func=cmd_bootstrap)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cmd is None:
        parser.print_help()
        return 0

    configure_logging(args.log_level)
    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
