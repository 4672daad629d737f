from dataclasses import dataclass
from typing import Optional

from sqlmodel import Session, select

from ebookstore.errors import EntityNotFound
from ebookstore.models.book import Book
from ebookstore.utils.clock import utcnow
from ebookstore.utils.pagination import Page, PageResult, paginate


@dataclass
class BookFilter:
    title: Optional[str] = None
    author_name: Optional[str] = None
    description: Optional[str] = None


class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_by_query(self, book_filter: BookFilter, page: Page) -> PageResult:
        query = select(Book)

        # case-insensitive substring match, AND-combined
        if book_filter.title:
            query = query.where(Book.title.icontains(book_filter.title, autoescape=True))

        if book_filter.author_name:
            query = query.where(Book.author_name.icontains(book_filter.author_name, autoescape=True))

        if book_filter.description:
            query = query.where(Book.description.icontains(book_filter.description, autoescape=True))

        query = query.order_by(Book.created_at.desc(), Book.id.asc())

        return paginate(session=self.session, query=query, page=page)

    def find_by_id(self, book_id: str) -> Book:
        book = self.session.get(Book, book_id)
        if book is None:
            raise EntityNotFound("Book", f"no book with id {book_id}")
        return book

    def create(self, book: Book) -> Book:
        self.session.add(book)
        self.session.commit()
        self.session.refresh(book)
        return book

    def update(self, book: Book) -> Book:
        book.updated_at = utcnow()
        self.session.add(book)
        self.session.commit()
        self.session.refresh(book)
        return book

    def delete(self, book_id: str) -> Book:
        book = self.find_by_id(book_id)
        self.session.delete(book)
        self.session.commit()
        return book
