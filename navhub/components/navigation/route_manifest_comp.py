"""
Route manifest loading component.

A manifest is a YAML document describing one module's registration:

    module: billing
    routes:
      - route: /admin/billing/invoices
        view_type: list
      - route: /admin/billing/settings
        view_type: form
        layout_profile: backend_default
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from navhub.helpers.dto.routes_dto import RouteDeclaration
from navhub.helpers.exceptions import RegistrationRequestError


def parse_route_manifest(data: Any) -> tuple[str, list[RouteDeclaration]]:
    """
    Turn a parsed manifest into (module_id, declarations).

    Only the manifest's shape is checked here; declaration contents are
    validated by the registration service.

    Raises:
        RegistrationRequestError: If the document is not a mapping with a routes list
    """
    if not isinstance(data, dict):
        raise RegistrationRequestError("manifest must be a mapping", field="manifest")

    routes = data.get("routes")
    if not isinstance(routes, list):
        raise RegistrationRequestError("routes must be a list", field="routes")

    declarations = []
    for item in routes:
        if isinstance(item, str):
            declarations.append(RouteDeclaration(route=item))
        elif isinstance(item, dict):
            declarations.append(RouteDeclaration.from_mapping(item))
        else:
            declarations.append(RouteDeclaration(route=item))

    module = data.get("module")
    return (module if isinstance(module, str) else ""), declarations


def load_route_manifest(path: str | Path) -> tuple[str, list[RouteDeclaration]]:
    """
    Read and parse a manifest file.

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file is not valid YAML
        RegistrationRequestError: If the document has the wrong shape
    """
    with open(path, encoding="utf-8") as f:
        return parse_route_manifest(yaml.safe_load(f))
