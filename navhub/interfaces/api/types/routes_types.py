"""
Route registration API types.

Declarations are accepted loosely typed: the registration service
validates every field and reports failures per index, which a strict
pydantic schema would pre-empt.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from typing_extensions import Self

from navhub.helpers.dto.routes_dto import RegisterRoutesResult, RouteDeclaration


class RegisterRoutesRequest(BaseModel):
    module: str = ""
    routes: list[dict[str, Any]] = Field(default_factory=list)

    def to_declarations(self) -> list[RouteDeclaration]:
        return [RouteDeclaration.from_mapping(item) for item in self.routes]


class RegisteredRouteResponse(BaseModel):
    route: str
    menu_id: str | None = None
    view_type: str
    layout_profile: str
    created: bool
    updated: bool


class RegisterRoutesResponse(BaseModel):
    module: str
    routes: list[RegisteredRouteResponse]

    @classmethod
    def from_dto(cls, result: RegisterRoutesResult) -> Self:
        return cls(
            module=result.module,
            routes=[RegisteredRouteResponse(**r.to_dict()) for r in result.routes],
        )


class UnregisterRoutesResponse(BaseModel):
    module: str
    removed: int
