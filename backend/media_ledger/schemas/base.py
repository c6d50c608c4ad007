"""camelCase base models for the media ledger API.

Services and ORM rows use snake_case (byte_count, created_at). Clients send
and receive byteCount, createdAt. Snake_case names are still accepted on
input, so routes can build responses from plain dicts.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request bodies and dict-built responses (access checks, ledger counters)."""
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class CamelORMModel(BaseModel):
    """Responses read straight off a MediaRecord row."""
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
