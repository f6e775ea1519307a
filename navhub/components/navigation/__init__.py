"""Navigation components: validation, layout profiles, tree building, feature flags, route declarations and manifests."""

from navhub.components.navigation.entry_validation_comp import (
    ADMIN_ROUTE_PREFIX,
    ALLOWED_VIEW_TYPES,
    validate_identifier,
    validate_route_path,
    validate_view_type,
)
from navhub.components.navigation.feature_flag_comp import evaluate_flags, flags_satisfied
from navhub.components.navigation.layout_profile_comp import (
    FALLBACK_PROFILE_ID,
    fallback_layout_profiles,
    resolve_layout_profiles,
    validate_profile_mapping,
    validate_profile_reference,
    validate_profile_structure,
)
from navhub.components.navigation.route_declaration_comp import (
    collect_declaration_failures,
    resolve_route_declarations,
)
from navhub.components.navigation.route_manifest_comp import load_route_manifest, parse_route_manifest
from navhub.components.navigation.tree_builder_comp import DANGLING_PARENT_POLICY, build_tree

__all__ = [
    "ADMIN_ROUTE_PREFIX",
    "ALLOWED_VIEW_TYPES",
    "DANGLING_PARENT_POLICY",
    "FALLBACK_PROFILE_ID",
    "build_tree",
    "collect_declaration_failures",
    "evaluate_flags",
    "fallback_layout_profiles",
    "flags_satisfied",
    "load_route_manifest",
    "parse_route_manifest",
    "resolve_layout_profiles",
    "resolve_route_declarations",
    "validate_identifier",
    "validate_profile_mapping",
    "validate_profile_reference",
    "validate_profile_structure",
    "validate_route_path",
    "validate_view_type",
]
