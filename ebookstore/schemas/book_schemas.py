from datetime import date, datetime
from typing import Optional

from pydantic import Field

from ebookstore.models.book import Book
from ebookstore.schemas.common import CamelModel


class CreateBookRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    author_name: str = Field(..., min_length=1, max_length=100)
    price: int = Field(..., ge=0, description="Price in minor units")
    release_date: date


class UpdateBookRequest(CamelModel):
    """Only these fields are mutable; anything else in the body is ignored."""

    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    author_name: Optional[str] = Field(None, min_length=1, max_length=100)


class BookResponse(CamelModel):
    id: str
    title: str
    description: str
    author_name: str
    poster_image_link: str
    price: int
    release_date: date
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_book(cls, book: Book, poster_image_link: str) -> "BookResponse":
        return cls(
            id=book.id,
            title=book.title,
            description=book.description,
            author_name=book.author_name,
            poster_image_link=poster_image_link,
            price=book.price,
            release_date=book.release_date,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )
