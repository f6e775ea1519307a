"""
Access DTOs.

Rules:
- Import only stdlib and typing (no navhub.* imports)
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Principal:
    """The caller a bearer credential resolved to."""

    subject: str
    roles: frozenset[str] = field(default_factory=frozenset)

    def has_any_role(self, roles: set[str] | frozenset[str]) -> bool:
        return bool(self.roles & roles)


@dataclass
class IssuedToken:
    """Result from access_service.issue_token. The token is only ever available here."""

    subject: str
    roles: list[str]
    token: str
