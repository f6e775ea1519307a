"""
Route declaration component.

Defaulting and per-declaration validation for module route
registration. Defaults are applied once, here, so validation and
persistence always see fully-resolved values.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from navhub.components.navigation.entry_validation_comp import (
    validate_identifier,
    validate_route_path,
    validate_view_type,
)
from navhub.components.navigation.layout_profile_comp import FALLBACK_PROFILE_ID, validate_profile_reference
from navhub.helpers.dto.navigation_dto import LayoutProfiles
from navhub.helpers.dto.routes_dto import ResolvedRouteDeclaration, RouteDeclaration
from navhub.helpers.dto.validation_dto import MENU_ID_NOT_FOUND, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_VIEW_TYPE = "list"
DEFAULT_LAYOUT_PROFILE = FALLBACK_PROFILE_ID


def resolve_route_declaration(declaration: RouteDeclaration) -> ResolvedRouteDeclaration:
    """Apply registration defaults. Only absent (None) values are defaulted."""
    return ResolvedRouteDeclaration(
        route=declaration.route,
        menu_id=declaration.menu_id or None,
        view_type=DEFAULT_VIEW_TYPE if declaration.view_type is None else declaration.view_type,
        layout_profile=DEFAULT_LAYOUT_PROFILE if declaration.layout_profile is None else declaration.layout_profile,
    )


def resolve_route_declarations(declarations: Sequence[RouteDeclaration]) -> list[ResolvedRouteDeclaration]:
    return [resolve_route_declaration(d) for d in declarations]


def validate_route_declaration(
    declaration: ResolvedRouteDeclaration,
    layout_profiles: LayoutProfiles,
    menu_exists: Callable[[str], bool],
) -> ValidationError | None:
    """
    Validate one resolved declaration; the first failing check wins.

    Order: route path, view type, layout profile, menu_id shape, menu_id existence.

    Args:
        declaration: Declaration with defaults applied
        layout_profiles: Profile mapping resolved once for the whole batch
        menu_exists: Lookup used only when a menu_id is supplied

    Returns:
        The first ValidationError, or None when the declaration is valid
    """
    error = (
        validate_route_path(declaration.route)
        or validate_view_type(declaration.view_type)
        or validate_profile_reference(declaration.layout_profile, layout_profiles)
    )
    if error:
        return error

    if declaration.menu_id:
        error = validate_identifier(declaration.menu_id, "menu_id")
        if error:
            return error

        if not menu_exists(declaration.menu_id):
            return ValidationError(
                code=MENU_ID_NOT_FOUND,
                message=f"Navigation item with id {declaration.menu_id} not found or not accessible",
                field="menu_id",
                value=declaration.menu_id,
            )

    return None


def collect_declaration_failures(
    declarations: Sequence[ResolvedRouteDeclaration],
    layout_profiles: LayoutProfiles,
    menu_exists: Callable[[str], bool],
) -> list[dict[str, Any]]:
    """
    Validate every declaration and collect failures with their index.

    A failure on one declaration never stops the others from being checked.

    Returns:
        List of {index, route, error} dicts in input order (empty when all pass)
    """
    failures: list[dict[str, Any]] = []
    for index, declaration in enumerate(declarations):
        error = validate_route_declaration(declaration, layout_profiles, menu_exists)
        if error:
            logger.debug(f"Route declaration {index} ({declaration.route!r}) rejected: {error.code}")
            failures.append({"index": index, "route": declaration.route, "error": error.to_dict()})
    return failures
