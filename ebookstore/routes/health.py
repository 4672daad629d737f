from fastapi import APIRouter, Depends
from sqlmodel import Session, text

from ebookstore.database import get_session

router = APIRouter()


@router.get("/healthcheck")
def health_check(session: Session = Depends(get_session)):
    # simple DB ping; a failure surfaces as a 500
    session.exec(text("SELECT 1"))
    return {"status": "OK"}
