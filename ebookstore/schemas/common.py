from typing import Generic, List, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ebookstore.utils.pagination import PageResult

T = TypeVar("T")


class CamelModel(BaseModel):
    """JSON bodies use camelCase keys; Python code keeps snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Paginated(CamelModel, Generic[T]):
    results: List[T]
    current_page: int
    per_page: int
    total_pages: int
    total_items: int

    @classmethod
    def from_page(cls, result: PageResult, items: List[T]) -> "Paginated[T]":
        return cls(
            results=items,
            current_page=result.page.number,
            per_page=result.page.size,
            total_pages=result.total_pages,
            total_items=result.total_items,
        )


class ErrorResponse(BaseModel):
    message: str
    details: Union[str, List[str]]
