from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from starlette.concurrency import run_in_threadpool

from ebookstore.dependencies.services import get_webhook_service
from ebookstore.services.webhook_service import WebhookService

router = APIRouter()


@router.post("/stripe/webhook")
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(None, alias="Stripe-Signature"),
    service: WebhookService = Depends(get_webhook_service),
):
    # the signature is computed over the exact raw bytes
    payload = await request.body()
    await run_in_threadpool(service.handle, payload, stripe_signature)
    return {"received": True}
