"""
Register command: register a module's routes from a YAML manifest.
"""

from __future__ import annotations

import argparse

import yaml

from navhub.app import build_application
from navhub.components.navigation.route_manifest_comp import load_route_manifest
from navhub.helpers.exceptions import RegistrationRequestError, RouteRegistrationError
from navhub.interfaces.cli.cli_ui import InfoPanel, console, failures_table, print_error, show_spinner


def cmd_register(args: argparse.Namespace) -> int:
    """Validate and register every route in the manifest; nothing is written if any route is invalid."""
    try:
        module_id, declarations = load_route_manifest(args.manifest)
    except (OSError, yaml.YAMLError) as e:
        print_error(f"Cannot read manifest {args.manifest}: {e}")
        return 1
    except RegistrationRequestError as e:
        print_error(f"Invalid manifest: {e}")
        return 1

    if args.module:
        module_id = args.module

    application = build_application()
    service = application.get_service("routes")

    try:
        result = show_spinner(
            f"Registering {len(declarations)} route(s)...", service.register_routes, module_id, declarations
        )
    except RegistrationRequestError as e:
        print_error(f"{e.field}: {e}")
        return 1
    except RouteRegistrationError as e:
        print_error(f"{e} ({len(e.details)} of {len(declarations)} rejected, nothing written)")
        console.print(failures_table(e.details))
        return 1

    created = sum(1 for r in result.routes if r.created)
    lines = [f"[bold]Module:[/bold] {result.module}", f"[bold]Created:[/bold] {created}"]
    lines.append(f"[bold]Updated:[/bold] {len(result.routes) - created}")
    lines.append("")
    lines.extend(
        f"{'+' if r.created else '~'} {r.route} ({r.view_type}, {r.layout_profile})" for r in result.routes
    )
    InfoPanel.show("Routes Registered", "\n".join(lines), "green")
    return 0
