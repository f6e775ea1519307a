"""
Layout profile resolution and validation component.

Layout profiles live in the navigation_settings singleton as a mapping
of profile id -> profile. When the singleton is absent, or its mapping
is null, exactly one implicit profile exists: backend_default.

Structure checks run in a fixed order and report only the first
violation, so the same bad profile always yields the same error:
object, label, zones, zone visibility flags, sidebar width type,
sidebar width sign, options, content_padding, max_content_width,
scroll_behavior.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from navhub.helpers.dto.navigation_dto import LayoutProfiles
from navhub.helpers.dto.validation_dto import LAYOUT_PROFILE_NOT_FOUND, VALIDATION_ERROR, ValidationError

logger = logging.getLogger(__name__)

FALLBACK_PROFILE_ID = "backend_default"

ALLOWED_CONTENT_PADDING: tuple[str, ...] = ("none", "sm", "md", "lg")
ALLOWED_MAX_CONTENT_WIDTH: tuple[str, ...] = ("full", "xl", "2xl")
ALLOWED_SCROLL_BEHAVIOR: tuple[str, ...] = ("main_only", "page")

_ZONE_NAMES = ("header", "sidebar", "toolbar", "footer")

_FALLBACK_PROFILE: dict[str, Any] = {
    "label": "Backend Default Layout",
    "zones": {
        "header": {"visible": True},
        "sidebar": {"visible": True, "width": 260},
        "toolbar": {"visible": True},
        "footer": {"visible": False},
    },
    "options": {
        "content_padding": "lg",
        "max_content_width": "full",
        "scroll_behavior": "main_only",
    },
}


class FallbackLayoutProfiles(dict):
    """The implicit single-profile mapping used when nothing is configured."""


def fallback_layout_profiles() -> FallbackLayoutProfiles:
    """Fresh copy of the implicit mapping; callers may mutate it freely."""
    return FallbackLayoutProfiles({FALLBACK_PROFILE_ID: copy.deepcopy(_FALLBACK_PROFILE)})


def resolve_layout_profiles(settings: dict[str, Any] | None) -> LayoutProfiles:
    """
    Resolve the effective profile mapping from the settings singleton.

    Args:
        settings: navigation_settings document, or None when no record exists

    Returns:
        The configured mapping, or FallbackLayoutProfiles when the record
        or its layout_profiles value is absent
    """
    if not settings or settings.get("layout_profiles") is None:
        return fallback_layout_profiles()
    return settings["layout_profiles"]


def is_fallback(profiles: LayoutProfiles | None) -> bool:
    return profiles is None or isinstance(profiles, FallbackLayoutProfiles)


def validate_profile_reference(profile_id: Any, available_profiles: LayoutProfiles | None) -> ValidationError | None:
    """
    Check that profile_id names a profile in available_profiles.

    None and FallbackLayoutProfiles both mean "nothing configured": only
    backend_default is accepted.
    """
    if not profile_id or not isinstance(profile_id, str):
        return ValidationError(
            code=VALIDATION_ERROR,
            message="Layout profile must be a non-empty string",
            field="layout_profile",
            value=profile_id,
        )

    if is_fallback(available_profiles):
        if profile_id != FALLBACK_PROFILE_ID:
            return ValidationError(
                code=LAYOUT_PROFILE_NOT_FOUND,
                message=f"No layout profiles configured. Only {FALLBACK_PROFILE_ID} is available.",
                field="layout_profile",
                value=profile_id,
            )
        return None

    if available_profiles is not None and profile_id not in available_profiles:
        return ValidationError(
            code=LAYOUT_PROFILE_NOT_FOUND,
            message=f"Layout profile '{profile_id}' not found in navigation_settings.layout_profiles",
            field="layout_profile",
            value=profile_id,
            details={"available_profiles": list(available_profiles.keys())},
        )

    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _enum_error(options: dict[str, Any], key: str, allowed: tuple[str, ...]) -> ValidationError | None:
    value = options.get(key)
    if value not in allowed:
        return ValidationError(
            code=VALIDATION_ERROR,
            message=f"Invalid {key}. Allowed values: {', '.join(allowed)}",
            field=f"options.{key}",
            value=value,
        )
    return None


def validate_profile_structure(profile: Any) -> ValidationError | None:
    """Return the first structural violation of a single layout profile, or None."""
    if not isinstance(profile, dict):
        return ValidationError(code=VALIDATION_ERROR, message="Layout profile must be an object", value=profile)

    label = profile.get("label")
    if not label or not isinstance(label, str):
        return ValidationError(
            code=VALIDATION_ERROR,
            message="Layout profile must have a label (string)",
            field="label",
        )

    zones = profile.get("zones")
    if not isinstance(zones, dict):
        return ValidationError(
            code=VALIDATION_ERROR,
            message="Layout profile must have zones (object)",
            field="zones",
        )

    for zone_name in _ZONE_NAMES:
        zone = zones.get(zone_name)
        if not isinstance(zone, dict) or not isinstance(zone.get("visible"), bool):
            return ValidationError(
                code=VALIDATION_ERROR,
                message="All zone visibility flags must be boolean",
                field="zones",
            )

    width = zones["sidebar"].get("width")
    if width is not None and not _is_number(width):
        return ValidationError(
            code=VALIDATION_ERROR,
            message="Sidebar width must be a number",
            field="zones.sidebar.width",
        )

    if width is not None and width <= 0:
        return ValidationError(
            code=VALIDATION_ERROR,
            message="Sidebar width must be positive",
            field="zones.sidebar.width",
            value=width,
        )

    options = profile.get("options")
    if not isinstance(options, dict):
        return ValidationError(
            code=VALIDATION_ERROR,
            message="Layout profile must have options (object)",
            field="options",
        )

    return (
        _enum_error(options, "content_padding", ALLOWED_CONTENT_PADDING)
        or _enum_error(options, "max_content_width", ALLOWED_MAX_CONTENT_WIDTH)
        or _enum_error(options, "scroll_behavior", ALLOWED_SCROLL_BEHAVIOR)
    )


def validate_profile_mapping(profiles: Any) -> ValidationError | None:
    """
    Validate a whole profile mapping before it is saved.

    Profiles are checked in mapping order; the first failing profile's
    error is returned with its id prefixed to the message and added to
    details as profile_id.
    """
    if not isinstance(profiles, dict):
        return ValidationError(code=VALIDATION_ERROR, message="Layout profiles must be an object", value=profiles)

    for profile_id, profile in profiles.items():
        error = validate_profile_structure(profile)
        if error:
            logger.debug(f"Layout profile '{profile_id}' rejected: {error.message}")
            return ValidationError(
                code=error.code,
                message=f"Profile '{profile_id}': {error.message}",
                field=error.field,
                value=error.value,
                details={"profile_id": profile_id, **(error.details or {})},
            )

    return None
