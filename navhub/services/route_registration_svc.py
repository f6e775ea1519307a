"""
Route registration service.

Modules declare the /admin/ routes they own. A batch is validated as a
whole before any write; then each declaration is reconciled on its own
as a create-or-update keyed by (module_id, route).
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from navhub.components.navigation.route_declaration_comp import (
    collect_declaration_failures,
    resolve_route_declarations,
)
from navhub.components.platform.revision_comp import NAVIGATION_ROUTES_KEY, bump_revision
from navhub.helpers.dto.navigation_dto import NavigationRoute
from navhub.helpers.dto.routes_dto import (
    RegisteredRoute,
    RegisterRoutesResult,
    ResolvedRouteDeclaration,
    RouteDeclaration,
)
from navhub.helpers.exceptions import RegistrationRequestError, RouteRegistrationError
from navhub.helpers.time_helper import now_iso

if TYPE_CHECKING:
    from navhub.persistence.db import Database
    from navhub.services.navigation_svc import NavigationService

logger = logging.getLogger(__name__)


@dataclass
class RouteRegistrationConfig:
    """Configuration for RouteRegistrationService."""

    max_batch_size: int = 100


class RouteRegistrationService:
    """
    Module route registration.

    Validation is all-or-nothing; writes are not. A storage failure while
    writing declaration N propagates immediately and leaves declarations
    before N applied.
    """

    def __init__(
        self,
        db: Database,
        navigation_service: NavigationService,
        cfg: RouteRegistrationConfig | None = None,
    ) -> None:
        self.db = db
        self.navigation_service = navigation_service
        self.cfg = cfg or RouteRegistrationConfig()

    def register_routes(self, module_id: str, declarations: Sequence[RouteDeclaration]) -> RegisterRoutesResult:
        """
        Register (create or update) a module's routes.

        Args:
            module_id: Registering module
            declarations: Routes as submitted; absent view_type / layout_profile are defaulted

        Returns:
            RegisterRoutesResult with one RegisteredRoute per declaration, in input order

        Raises:
            RegistrationRequestError: Empty module id, empty or oversized batch
            RouteRegistrationError: Any declaration invalid; nothing was written
        """
        if not module_id or not isinstance(module_id, str) or not module_id.strip():
            raise RegistrationRequestError("module must be a non-empty string", field="module")
        if not declarations:
            raise RegistrationRequestError("routes must be a non-empty array", field="routes")
        if len(declarations) > self.cfg.max_batch_size:
            raise RegistrationRequestError(
                f"routes must contain at most {self.cfg.max_batch_size} entries", field="routes"
            )

        resolved = resolve_route_declarations(declarations)

        # one profile snapshot for the whole batch
        layout_profiles = self.navigation_service.get_layout_profiles()
        failures = collect_declaration_failures(resolved, layout_profiles, self._menu_exists)
        if failures:
            logger.info(
                f"[RouteRegistration] Rejected registration for {module_id}: "
                f"{len(failures)} of {len(resolved)} route(s) invalid"
            )
            raise RouteRegistrationError(failures)

        results = [self._reconcile(module_id, declaration) for declaration in resolved]
        bump_revision(self.db, NAVIGATION_ROUTES_KEY)

        created = sum(1 for r in results if r.created)
        logger.info(
            f"[RouteRegistration] Registered {len(results)} route(s) for {module_id}: "
            f"{created} created, {len(results) - created} updated"
        )
        return RegisterRoutesResult(module=module_id, routes=results)

    def _menu_exists(self, menu_id: str) -> bool:
        return self.navigation_service.get_item(menu_id) is not None

    def _reconcile(self, module_id: str, declaration: ResolvedRouteDeclaration) -> RegisteredRoute:
        """Upsert one validated declaration by its natural key."""
        timestamp = now_iso()
        existing = self.db.navigation_routes.find_route(module_id, declaration.route)

        if existing:
            self.db.navigation_routes.update_route(
                existing["id"],
                {
                    "menu_id": declaration.menu_id,
                    "view_type": declaration.view_type,
                    "layout_profile": declaration.layout_profile,
                    "updated_at": timestamp,
                },
            )
        else:
            self.db.navigation_routes.insert_route(
                NavigationRoute(
                    id=str(uuid.uuid4()),
                    module_id=module_id,
                    route=declaration.route,
                    menu_id=declaration.menu_id,
                    view_type=declaration.view_type,
                    layout_profile=declaration.layout_profile,
                    created_at=timestamp,
                    updated_at=timestamp,
                ).to_dict()
            )

        return RegisteredRoute(
            route=declaration.route,
            menu_id=declaration.menu_id,
            view_type=declaration.view_type,
            layout_profile=declaration.layout_profile,
            created=not existing,
            updated=bool(existing),
        )

    def unregister_routes(self, module_id: str, routes: Sequence[str] | None = None) -> int:
        """
        Remove a module's routes, all of them or only the listed route strings.

        Returns:
            Number of routes removed (0 is not an error)
        """
        removed = self.db.navigation_routes.delete_for_module(module_id, list(routes) if routes else None)
        if removed:
            bump_revision(self.db, NAVIGATION_ROUTES_KEY)
        logger.info(f"[RouteRegistration] Unregistered {removed} route(s) for {module_id}")
        return removed

    def get_module_routes(self, module_id: str) -> list[NavigationRoute]:
        return self.navigation_service.get_navigation_routes(module_id)
