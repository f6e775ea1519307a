"""
Application composition root and dependency injection container.

Application owns the configuration, the Database and every service.
Services are built once in start() and looked up by name; interfaces
receive the Application explicitly (create_api_app(application), the
CLI's build_application()) instead of importing a module-level instance.
"""

from __future__ import annotations

import logging
from typing import Any

from navhub.components.platform.arango_bootstrap_comp import ensure_schema
from navhub.persistence.db import Database
from navhub.services.access_svc import AccessService
from navhub.services.config_svc import ConfigService
from navhub.services.navigation_svc import NavigationService, NavigationServiceConfig
from navhub.services.refresh_policy_svc import RefreshPolicyService
from navhub.services.route_registration_svc import RouteRegistrationConfig, RouteRegistrationService
from navhub.services.system_state_svc import SystemStateService

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
#  Application Class - Composition Root & DI Container
# ----------------------------------------------------------------------
class Application:
    """
    Composition root for navhub.

    - Config-derived values are instance attributes computed in __init__
    - Services are registered via register_service() during start()
    - Access services via application.get_service("name")
    """

    def __init__(self, config_service: ConfigService | None = None, db: Database | None = None) -> None:
        """
        Args:
            config_service: Configuration source (defaults to a fresh ConfigService)
            db: Pre-built Database; when omitted one is connected from config
        """
        self._config_service = config_service or ConfigService()
        cfg = self._config_service.get_config()

        self.arango_hosts: str = str(cfg["arango_hosts"])
        self.arango_db: str = str(cfg["arango_db"])
        self.api_host: str = str(cfg["api_host"])
        self.api_port: int = int(cfg["api_port"])
        self.log_level: str = str(cfg["log_level"])
        self.max_batch_size: int = max(1, int(cfg["max_batch_size"]))
        self.reorder_max_workers: int = max(1, int(cfg["reorder_max_workers"]))

        self.db = db or Database.connect(
            hosts=self.arango_hosts,
            username=str(cfg["arango_username"]),
            password=str(cfg["arango_password"]),
            db_name=self.arango_db,
        )

        # Services container (DI registry)
        self.services: dict[str, Any] = {}
        self._running = False

    def register_service(self, name: str, service: Any) -> None:
        self.services[name] = service

    def get_service(self, name: str) -> Any:
        """
        Get a service from the DI container.

        Raises:
            KeyError: If service not found
        """
        if name not in self.services:
            raise KeyError(f"Service '{name}' not found. Available services: {list(self.services.keys())}")
        return self.services[name]

    def bootstrap_schema(self) -> None:
        """Create missing collections and indexes (idempotent)."""
        ensure_schema(self.db.db)

    def start(self, bootstrap: bool = False) -> None:
        """
        Build and register all services.

        Args:
            bootstrap: Also ensure the storage schema before wiring services
        """
        if self._running:
            logger.warning("[Application] Already running, ignoring start() call")
            return

        logger.info("[Application] Starting...")
        if bootstrap:
            self.bootstrap_schema()

        navigation = NavigationService(
            self.db,
            NavigationServiceConfig(reorder_max_workers=self.reorder_max_workers),
        )
        self.register_service("config", self._config_service)
        self.register_service("navigation", navigation)
        self.register_service(
            "routes",
            RouteRegistrationService(
                self.db,
                navigation,
                RouteRegistrationConfig(max_batch_size=self.max_batch_size),
            ),
        )
        self.register_service("refresh_policy", RefreshPolicyService(self.db))
        self.register_service("system_state", SystemStateService(self.db))
        self.register_service("access", AccessService(self.db))

        self._running = True
        logger.info(f"[Application] Started with services: {', '.join(self.services)}")

    def stop(self) -> None:
        if not self._running:
            return
        self.services.clear()
        self._running = False
        logger.info("[Application] Stopped")

    def is_running(self) -> bool:
        return self._running


def build_application(overrides: dict[str, Any] | None = None, bootstrap: bool = False) -> Application:
    """Construct and start an Application from layered configuration."""
    application = Application(ConfigService(overrides))
    application.start(bootstrap=bootstrap)
    return application
