"""ArangoDB connection for navhub.

python-arango pools HTTP connections per client and is safe to share
across threads; reorder batches and the full navigation read rely on
that when they fan out over a thread pool.

Every AQL call made through CheckedDatabase has its bind vars checked
against the document model first: JSON primitives, finite floats, and
dict/list/tuple/set containers of them. Anything else (DTO instances,
datetimes, NaN) is a bug in the calling operations class and fails
before a request is sent.
"""

from __future__ import annotations

import math
from typing import Any

from arango import ArangoClient
from arango.aql import AQL
from arango.collection import StandardCollection
from arango.database import StandardDatabase

DEFAULT_REQUEST_TIMEOUT_S = 30.0


def _to_bind_value(value: Any, where: str) -> Any:
    if value is None or isinstance(value, str | bool | int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeError(f"Bind value at {where} is {value!r}; only finite floats can be stored")
        return value
    if isinstance(value, dict):
        return {str(key): _to_bind_value(item, f"{where}.{key}") for key, item in value.items()}
    if isinstance(value, list | tuple | set | frozenset):
        return [_to_bind_value(item, f"{where}[{index}]") for index, item in enumerate(value)]
    raise TypeError(
        f"Bind value at {where} has type {type(value).__name__}; "
        "convert DTOs with to_dict() before they reach the persistence layer"
    )


def check_bind_vars(bind_vars: dict[str, Any] | None) -> dict[str, Any]:
    """
    Return bind_vars as plain JSON values.

    Raises:
        TypeError: Naming the first offending value by path, e.g. "@doc.roles[0]"
    """
    return {name: _to_bind_value(value, f"@{name}") for name, value in (bind_vars or {}).items()}


class CheckedAQL:
    """AQL API whose execute() checks bind vars; other attributes pass through."""

    def __init__(self, aql: AQL) -> None:
        self._aql = aql

    def execute(self, query: str, bind_vars: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        return self._aql.execute(query, bind_vars=check_bind_vars(bind_vars), **kwargs)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._aql, name)


class CheckedDatabase:
    """StandardDatabase wrapper exposing CheckedAQL as `.aql`."""

    def __init__(self, db: StandardDatabase) -> None:
        self._db = db
        self.aql = CheckedAQL(db.aql)

    def collection(self, name: str) -> StandardCollection:
        return self._db.collection(name)  # type: ignore[return-value]

    def __getattr__(self, name: str) -> Any:
        return getattr(self._db, name)


DatabaseLike = StandardDatabase | CheckedDatabase


def create_arango_client(
    hosts: str = "http://localhost:8529",
    username: str = "navhub",
    password: str = "navhub",
    db_name: str = "navhub",
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_S,
) -> CheckedDatabase:
    """Open a handle on an existing database.

    No request is made here; an unreachable server surfaces as
    ServerConnectionError on the first query.
    """
    client = ArangoClient(hosts=hosts, request_timeout=request_timeout)
    return CheckedDatabase(client.db(db_name, username=username, password=password))
