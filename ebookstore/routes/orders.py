from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse

from ebookstore.constants.order_status import OrderStatus
from ebookstore.dependencies.auth import authenticate
from ebookstore.dependencies.services import get_shop_service
from ebookstore.models.user import User
from ebookstore.schemas.common import Paginated
from ebookstore.schemas.order_schemas import CreateOrderRequest, OrderResponse
from ebookstore.services.shop_service import ShopService
from ebookstore.utils.pagination import Page

router = APIRouter()


@router.get("", response_model=Paginated[OrderResponse])
def list_orders(
    order_status: Optional[OrderStatus] = Query(None, alias="status"),
    page: Optional[int] = Query(None),
    per_page: Optional[int] = Query(None, alias="perPage"),
    user: User = Depends(authenticate),
    service: ShopService = Depends(get_shop_service),
):
    return service.list_orders(user, order_status, Page.from_params(page, per_page))


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: CreateOrderRequest,
    user: User = Depends(authenticate),
    service: ShopService = Depends(get_shop_service),
):
    return service.create_order(user, payload.book_id)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: str,
    user: User = Depends(authenticate),
    service: ShopService = Depends(get_shop_service),
):
    return service.get_order(user, order_id)


@router.get("/{order_id}/download")
def download_book(
    order_id: str,
    user: User = Depends(authenticate),
    service: ShopService = Depends(get_shop_service),
):
    url = service.download_book(user, order_id)
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)
