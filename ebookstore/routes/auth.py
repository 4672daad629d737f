from fastapi import APIRouter, Depends, Response, status

from ebookstore.dependencies.services import get_auth_service
from ebookstore.schemas.user_schemas import (
    CredentialsResponse,
    LoginRequest,
    PasswordResetRequest,
    RegisterRequest,
)
from ebookstore.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=CredentialsResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    return service.register(payload)


@router.post("/login", response_model=CredentialsResponse, status_code=status.HTTP_201_CREATED)
def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    return service.login(payload.email, payload.password)


@router.post("/password-reset", status_code=status.HTTP_204_NO_CONTENT)
def password_reset(payload: PasswordResetRequest, service: AuthService = Depends(get_auth_service)):
    service.reset_password(payload.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
