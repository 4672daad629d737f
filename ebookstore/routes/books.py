from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status
from pydantic import ValidationError

from ebookstore.dependencies.auth import authenticate, require_admin
from ebookstore.dependencies.services import get_catalog_service
from ebookstore.errors import NotValid
from ebookstore.models.user import User
from ebookstore.repositories.book_repository import BookFilter
from ebookstore.schemas.book_schemas import BookResponse, CreateBookRequest, UpdateBookRequest
from ebookstore.schemas.common import Paginated
from ebookstore.services.catalog_service import CatalogService
from ebookstore.utils.pagination import Page

router = APIRouter()


@router.get("", response_model=Paginated[BookResponse])
def list_books(
    title: Optional[str] = Query(None),
    author_name: Optional[str] = Query(None, alias="authorName"),
    description: Optional[str] = Query(None),
    page: Optional[int] = Query(None),
    per_page: Optional[int] = Query(None, alias="perPage"),
    user: User = Depends(authenticate),
    service: CatalogService = Depends(get_catalog_service),
):
    book_filter = BookFilter(title=title, author_name=author_name, description=description)
    return service.list_books(book_filter, Page.from_params(page, per_page))


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
def create_book(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    author_name: Optional[str] = Form(None, alias="authorName"),
    price: Optional[str] = Form(None),
    release_date: Optional[str] = Form(None, alias="releaseDate"),
    poster: UploadFile = File(...),
    content: UploadFile = File(...),
    admin: User = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    # multipart fields arrive as strings; the DTO does the coercion
    try:
        request = CreateBookRequest(
            title=title,
            description=description,
            author_name=author_name,
            price=price,
            release_date=release_date,
        )
    except ValidationError as e:
        raise NotValid("CreateBook", e) from e

    return service.create_book(request, poster, content)


@router.get("/{book_id}", response_model=BookResponse)
def get_book(
    book_id: str,
    user: User = Depends(authenticate),
    service: CatalogService = Depends(get_catalog_service),
):
    return service.get_book(book_id)


@router.patch("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_book(
    book_id: str,
    payload: UpdateBookRequest,
    admin: User = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    service.update_book(book_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: str,
    admin: User = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    service.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
