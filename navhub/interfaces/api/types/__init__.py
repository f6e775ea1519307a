"""
API request/response types (Pydantic).

Owned by the interface layer; built from internal DTOs via .from_dto().
"""
