import math
from dataclasses import dataclass

from sqlalchemy import func
from sqlmodel import select

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


@dataclass(frozen=True)
class Page:
    number: int = DEFAULT_PAGE
    size: int = DEFAULT_PER_PAGE

    @classmethod
    def from_params(cls, page=None, per_page=None) -> "Page":
        """1-based page number; per_page clamped to [1, MAX_PER_PAGE]."""
        number = page if page is not None else DEFAULT_PAGE
        size = per_page if per_page is not None else DEFAULT_PER_PAGE

        if number < 1:
            number = 1

        size = max(1, min(size, MAX_PER_PAGE))

        return cls(number=number, size=size)

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.size


@dataclass
class PageResult:
    items: list
    page: Page
    total_items: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page.size)


def paginate(*, session, query, page: Page) -> PageResult:
    total = session.exec(
        select(func.count()).select_from(query.subquery())
    ).one()

    results = session.exec(
        query.offset(page.offset).limit(page.size)
    ).all()

    return PageResult(items=list(results), page=page, total_items=total)
