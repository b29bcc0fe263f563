# shopverse/services/user_service.py
import logging

from shopverse.core.errors import UnauthorizedError, ValidationError
from shopverse.core.security import create_access_token, hash_password, verify_password
from shopverse.models.user import Admin, User
from shopverse.repositories.record_store import RecordStore
from shopverse.repositories.user_repo import UserRepository
from shopverse.schemas.user import (
    AdminAuthResponse,
    AdminRead,
    AuthResponse,
    RegisterInput,
    UserRead,
)

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic for customer and admin identity.

    Responsibilities:
      - register customers with hashed passwords
      - verify credentials and issue access tokens
      - look up the profile behind a resolved identity
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    # ----- Customers -----

    def register(self, store: RecordStore, payload: RegisterInput) -> AuthResponse:
        """
        Create a customer account and log it in.

        Raises:
            ValidationError: if the email is already registered.
        """
        if self.repo.get_by_email(store, payload.email):
            raise ValidationError("User already exists")

        user = User(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
        )
        self.repo.create(store, user)
        logger.info("User %s registered", user.id)

        return AuthResponse(
            message="User registered successfully",
            user=UserRead.model_validate(user.model_dump()),
            access_token=create_access_token(user.id, "user"),
        )

    def login(self, store: RecordStore, email: str, password: str) -> AuthResponse:
        """
        Raises:
            UnauthorizedError: unknown email or wrong password.
        """
        user = self.repo.get_by_email(store, email)
        if not user or not verify_password(password, user.password_hash):
            raise UnauthorizedError("Invalid credentials")

        return AuthResponse(
            message="Login successful",
            user=UserRead.model_validate(user.model_dump()),
            access_token=create_access_token(user.id, "user"),
        )

    def get_user(self, store: RecordStore, user_id: str | None) -> UserRead | None:
        """Profile of a resolved customer id; None for guests or deleted users."""
        if user_id is None:
            return None
        user = self.repo.get_by_id(store, user_id)
        return UserRead.model_validate(user.model_dump()) if user else None

    # ----- Admins -----

    def admin_login(
        self,
        store: RecordStore,
        username: str,
        password: str,
    ) -> AdminAuthResponse:
        admin = self.repo.get_admin_by_username(store, username)
        if not admin or not verify_password(password, admin.password_hash):
            raise UnauthorizedError("Invalid credentials")

        return AdminAuthResponse(
            message="Admin login successful",
            admin=AdminRead(id=admin.id, username=admin.username),
            access_token=create_access_token(admin.id, "admin"),
        )

    def get_admin(self, store: RecordStore, admin_id: str | None) -> AdminRead | None:
        if admin_id is None:
            return None
        admin = self.repo.get_admin_by_id(store, admin_id)
        return AdminRead(id=admin.id, username=admin.username) if admin else None

    def setup_admin(self, store: RecordStore, username: str, password: str) -> Admin:
        """
        Replace the admins collection with a single account.

        Used by setup_admin.py to bootstrap a fresh data directory.
        """
        admin = Admin(id="admin1", username=username, password_hash=hash_password(password))
        self.repo.replace_admins(store, [admin])
        return admin
