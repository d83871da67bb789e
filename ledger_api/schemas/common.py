"""Common Schemas - the response envelope and page container shared by every endpoint.

Invariants:
    - Success envelope: code == 0, message == "ok"
    - Error envelopes share the same keys (see core.errors.LedgerError.to_response)
    - Page.total_pages == ceil(total / size); last is True when page >= total_pages
    - Wire format is camelCase; Python attributes stay snake_case
"""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

SUCCESS_CODE = 0
SUCCESS_MESSAGE = "ok"


class ApiModel(BaseModel):
    """Base for wire schemas: camelCase aliases, accepts either spelling on input."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Response(ApiModel, Generic[T]):
    """Uniform response envelope."""
    code: int = SUCCESS_CODE
    message: str = SUCCESS_MESSAGE
    data: T | None = None


class Page(ApiModel, Generic[T]):
    """One window of a paginated listing."""
    items: list[T] = Field(default_factory=list)
    page: int
    size: int
    total: int
    total_pages: int
    first: bool
    last: bool
    visible: int

    @classmethod
    def build(cls, items: list, total: int, page: int, size: int) -> "Page":
        total_pages = math.ceil(total / size) if size > 0 else 0
        return cls(
            items=items,
            page=page,
            size=size,
            total=total,
            total_pages=total_pages,
            first=page == 1,
            last=page >= total_pages,
            visible=len(items),
        )


def success(data=None) -> Response:
    return Response(data=data)
