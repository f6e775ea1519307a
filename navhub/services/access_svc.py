"""Access service.

Resolves bearer tokens to principals and issues new tokens.

Architecture Notes:
- Tokens are random (secrets.token_urlsafe) and stored only as SHA-256
  hashes, so a lookup is a single indexed equality match.
- Role gating happens in the interface layer via Principal.has_any_role.
"""

from __future__ import annotations

import hashlib
import logging
import secrets
from collections.abc import Iterable
from typing import TYPE_CHECKING

from navhub.helpers.dto.access_dto import IssuedToken, Principal
from navhub.helpers.time_helper import now_iso

if TYPE_CHECKING:
    from navhub.persistence.db import Database

logger = logging.getLogger(__name__)

ADMIN_ROLES = frozenset({"admin", "system"})


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class AccessService:
    """Bearer token issuing and resolution."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def resolve_principal(self, token: str | None) -> Principal | None:
        """Look up the principal for a presented token; None when unknown or revoked."""
        if not token:
            return None
        record = self._db.api_tokens.get_by_hash(hash_token(token))
        if not record:
            return None
        return Principal(subject=record["subject"], roles=frozenset(record.get("roles") or []))

    def issue_token(self, subject: str, roles: Iterable[str]) -> IssuedToken:
        """Mint a token for subject. The clear token is returned once and never stored."""
        if not subject:
            raise ValueError("subject must be a non-empty string")
        role_list = sorted(set(roles))
        token = secrets.token_urlsafe(32)
        self._db.api_tokens.insert_token(subject, role_list, hash_token(token), now_iso())
        logger.info(f"[AccessService] Issued token for {subject} with roles {role_list}")
        return IssuedToken(subject=subject, roles=role_list, token=token)

    def revoke_tokens(self, subject: str) -> int:
        revoked = self._db.api_tokens.revoke_subject(subject)
        logger.info(f"[AccessService] Revoked {revoked} token(s) for {subject}")
        return revoked

    @staticmethod
    def is_admin(principal: Principal) -> bool:
        return principal.has_any_role(ADMIN_ROLES)
