# shopverse/routers/auth.py
from fastapi import APIRouter, Depends

from shopverse.core.auth import resolve_user
from shopverse.database import get_store
from shopverse.repositories.record_store import RecordStore
from shopverse.repositories.user_repo import UserRepository
from shopverse.schemas.user import (
    AuthResponse,
    CurrentUserResponse,
    LoginInput,
    RegisterInput,
)
from shopverse.services.user_service import UserService

router = APIRouter(tags=["Auth"])

repo = UserRepository()
service = UserService(repo)


@router.post("/register", response_model=AuthResponse)
def register(
    payload: RegisterInput,
    store: RecordStore = Depends(get_store),
):
    """
    Create a customer account.

    Returns the profile and a bearer token for subsequent requests.
    """
    return service.register(store, payload)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginInput,
    store: RecordStore = Depends(get_store),
):
    """
    Exchange email + password for a bearer token.
    """
    return service.login(store, payload.email, payload.password)


@router.get("/user", response_model=CurrentUserResponse)
def current_user(
    store: RecordStore = Depends(get_store),
    user_id: str | None = Depends(resolve_user),
):
    """
    Return the authenticated customer, or `{"user": null}` for guests.
    """
    return CurrentUserResponse(user=service.get_user(store, user_id))
