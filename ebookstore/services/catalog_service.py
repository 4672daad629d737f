import logging
from typing import Optional, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from ebookstore.models.book import Book
from ebookstore.repositories.book_repository import BookFilter
from ebookstore.schemas.book_schemas import BookResponse, CreateBookRequest, UpdateBookRequest
from ebookstore.schemas.common import Paginated
from ebookstore.utils.pagination import Page, PageResult

logger = logging.getLogger(__name__)

DEFAULT_POSTER_CONTENT_TYPE = "image/jpeg"
DEFAULT_CONTENT_TYPE = "application/pdf"


class BookStore(Protocol):
    def find_by_query(self, book_filter: BookFilter, page: Page) -> PageResult: ...
    def find_by_id(self, book_id: str) -> Book: ...
    def create(self, book: Book) -> Book: ...
    def update(self, book: Book) -> Book: ...
    def delete(self, book_id: str) -> Book: ...


class FileStorage(Protocol):
    def save_file(self, key: str, content_type: str, fileobj) -> str: ...
    def presigned_url(self, key: str) -> str: ...
    def delete_file(self, key: str) -> None: ...


class CatalogService:
    def __init__(self, books: BookStore, storage: FileStorage, id_generator):
        self.books = books
        self.storage = storage
        self.id_generator = id_generator

    def _to_response(self, book: Book) -> BookResponse:
        return BookResponse.from_book(book, self.storage.presigned_url(book.poster_image_bucket_key))

    def _upload(self, prefix: str, upload, fallback_type: str) -> str:
        key = f"{prefix}_{self.id_generator.new_id()}"
        content_type = getattr(upload, "content_type", None) or fallback_type
        return self.storage.save_file(key, content_type, upload.file)

    def create_book(self, request: CreateBookRequest, poster, content) -> BookResponse:
        """Upload both assets, then persist the book pointing at them."""
        poster_key = self._upload("poster", poster, DEFAULT_POSTER_CONTENT_TYPE)
        content_key = self._upload("content", content, DEFAULT_CONTENT_TYPE)

        book = Book(
            id=self.id_generator.new_id(),
            title=request.title,
            description=request.description,
            author_name=request.author_name,
            price=request.price,
            release_date=request.release_date,
            poster_image_bucket_key=poster_key,
            content_bucket_key=content_key,
        )
        book = self.books.create(book)
        logger.info("book created | book_id=%s | title=%s", book.id, book.title)

        return self._to_response(book)

    def get_book(self, book_id: str) -> BookResponse:
        return self._to_response(self.books.find_by_id(book_id))

    def list_books(self, book_filter: BookFilter, page: Page) -> Paginated[BookResponse]:
        result = self.books.find_by_query(book_filter, page)
        items = [self._to_response(book) for book in result.items]
        return Paginated[BookResponse].from_page(result, items)

    def update_book(self, book_id: str, patch: UpdateBookRequest) -> None:
        book = self.books.find_by_id(book_id)

        # only the descriptive fields are mutable
        for field, value in patch.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(book, field, value)

        self.books.update(book)
        logger.info("book updated | book_id=%s", book_id)

    def delete_book(self, book_id: str) -> None:
        book = self.books.delete(book_id)
        logger.info("book deleted | book_id=%s", book_id)

        for key in (book.poster_image_bucket_key, book.content_bucket_key):
            self._delete_object(key)

    def _delete_object(self, key: Optional[str]) -> None:
        if not key:
            return
        try:
            self.storage.delete_file(key)
        except (ClientError, BotoCoreError) as e:
            logger.warning("could not delete object %s: %s", key, e)

    def get_book_content_url(self, book_id: str) -> str:
        book = self.books.find_by_id(book_id)
        return self.storage.presigned_url(book.content_bucket_key)
