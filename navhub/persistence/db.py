"""Application database facade.

One attribute per collection, each an operations class owning that
collection's AQL. Services depend on this facade, never on raw AQL.
"""

from __future__ import annotations

from navhub.persistence.arango_client import DatabaseLike, create_arango_client
from navhub.persistence.database.api_tokens_aql import ApiTokensOperations
from navhub.persistence.database.feature_flags_aql import FeatureFlagsOperations
from navhub.persistence.database.navigation_items_aql import NavigationItemsOperations
from navhub.persistence.database.navigation_routes_aql import NavigationRoutesOperations
from navhub.persistence.database.navigation_settings_aql import NavigationSettingsOperations
from navhub.persistence.database.refresh_policy_aql import RefreshPolicyOperations
from navhub.persistence.database.system_revision_aql import SystemRevisionOperations

__all__ = ["Database"]


class Database:
    """Application database.

    Single source of truth for navigation data access across all services.
    Construct with an existing handle (tests pass a mock) or via connect().
    """

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db

        # Operation classes, one per collection (exact collection names)
        self.navigation_items = NavigationItemsOperations(db)
        self.navigation_routes = NavigationRoutesOperations(db)
        self.navigation_settings = NavigationSettingsOperations(db)
        self.feature_flags = FeatureFlagsOperations(db)
        self.refresh_policy = RefreshPolicyOperations(db)
        self.system_revision = SystemRevisionOperations(db)
        self.api_tokens = ApiTokensOperations(db)

    @classmethod
    def connect(
        cls,
        hosts: str,
        username: str,
        password: str,
        db_name: str,
    ) -> Database:
        """Open a connection to an existing ArangoDB database."""
        return cls(create_arango_client(hosts=hosts, username=username, password=password, db_name=db_name))
