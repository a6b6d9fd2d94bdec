"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _parse_positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


class Pagination(BaseModel):
    """Page/limit pair after normalization."""

    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(
        cls,
        page: str | None,
        limit: str | None,
        *,
        default_limit: int = 10,
        max_limit: int = 50,
    ) -> Pagination:
        """Normalize raw query strings.

        ``page`` falls back to 1 when absent, non-numeric or below 1. ``limit``
        falls back to ``default_limit`` when absent or non-numeric and is then
        clamped to ``[1, max_limit]``.
        """
        parsed_page = _parse_positive_int(page)
        if parsed_page is None or parsed_page < 1:
            parsed_page = 1

        parsed_limit = _parse_positive_int(limit)
        if parsed_limit is None:
            parsed_limit = default_limit
        parsed_limit = max(1, min(parsed_limit, max_limit))

        return cls(page=parsed_page, limit=parsed_limit)
