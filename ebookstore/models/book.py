from datetime import date, datetime

from sqlmodel import SQLModel, Field

from ebookstore.utils.clock import utcnow


class Book(SQLModel, table=True):
    __tablename__ = "books"

    id: str = Field(primary_key=True, max_length=36)
    title: str = Field(max_length=100, index=True)
    description: str
    author_name: str = Field(max_length=100)

    # minor units
    price: int = Field(ge=0)
    release_date: date

    # object storage keys, never exposed to clients
    poster_image_bucket_key: str
    content_bucket_key: str

    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)
