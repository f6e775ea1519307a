"""
Database operations package.

One operations class per collection; each *_aql.py file owns all AQL for
its collection.
"""

from .api_tokens_aql import ApiTokensOperations
from .feature_flags_aql import FeatureFlagsOperations
from .navigation_items_aql import NavigationItemsOperations
from .navigation_routes_aql import NavigationRoutesOperations
from .navigation_settings_aql import NavigationSettingsOperations
from .refresh_policy_aql import RefreshPolicyOperations
from .system_revision_aql import SystemRevisionOperations

__all__ = [
    "ApiTokensOperations",
    "FeatureFlagsOperations",
    "NavigationItemsOperations",
    "NavigationRoutesOperations",
    "NavigationSettingsOperations",
    "RefreshPolicyOperations",
    "SystemRevisionOperations",
]
