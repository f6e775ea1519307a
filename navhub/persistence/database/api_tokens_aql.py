"""API token operations for ArangoDB. Only SHA-256 hashes are stored."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from navhub.persistence.arango_client import DatabaseLike

if TYPE_CHECKING:
    from arango.cursor import Cursor


class ApiTokensOperations:
    """Operations for the api_tokens collection."""

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db
        self.collection = db.collection("api_tokens")

    def get_by_hash(self, token_hash: str) -> dict[str, Any] | None:
        """Get the token record (subject, roles) for a hash, or None."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR t IN api_tokens
                    FILTER t.token_hash == @token_hash AND t.revoked != true
                    LIMIT 1
                    RETURN { subject: t.subject, roles: t.roles }
                """,
                bind_vars={"token_hash": token_hash},
            ),
        )
        return next(cursor, None)

    def insert_token(self, subject: str, roles: list[str], token_hash: str, timestamp: str) -> None:
        self.db.aql.execute(
            """
            INSERT {
                subject: @subject,
                roles: @roles,
                token_hash: @token_hash,
                revoked: false,
                created_at: @timestamp
            } INTO api_tokens
            """,
            bind_vars={"subject": subject, "roles": roles, "token_hash": token_hash, "timestamp": timestamp},
        )

    def revoke_subject(self, subject: str) -> int:
        """Revoke every token of a subject. Returns how many were revoked."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR t IN api_tokens
                    FILTER t.subject == @subject AND t.revoked != true
                    UPDATE t WITH { revoked: true } IN api_tokens
                    RETURN 1
                """,
                bind_vars={"subject": subject},
            ),
        )
        return sum(1 for _ in cursor)
