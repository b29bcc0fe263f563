# shopverse/repositories/user_repo.py
from shopverse.models.user import Admin, User
from shopverse.repositories.record_store import ADMINS, USERS, RecordStore


class UserRepository:
    """
    Data access layer for the `users` and `admins` collections.

    Responsibilities:
      - Whole-collection reads and writes
      - No FastAPI, no HTTP, no business logic
    """

    # ----- Customers -----

    def list_all(self, store: RecordStore) -> list[User]:
        return [User.model_validate(raw) for raw in store.load(USERS)]

    def get_by_id(self, store: RecordStore, user_id: str) -> User | None:
        """Return a User by id, or None if not found."""
        return next((u for u in self.list_all(store) if u.id == user_id), None)

    def get_by_email(self, store: RecordStore, email: str) -> User | None:
        """Return a User by email, or None if not found."""
        return next((u for u in self.list_all(store) if u.email == email), None)

    def create(self, store: RecordStore, user: User) -> User:
        """Append a new User and persist the collection."""
        users = self.list_all(store)
        users.append(user)
        store.save(USERS, [u.model_dump(mode="json") for u in users])
        return user

    def count(self, store: RecordStore) -> int:
        return len(store.load(USERS))

    # ----- Admins -----

    def list_admins(self, store: RecordStore) -> list[Admin]:
        return [Admin.model_validate(raw) for raw in store.load(ADMINS)]

    def get_admin_by_id(self, store: RecordStore, admin_id: str) -> Admin | None:
        return next((a for a in self.list_admins(store) if a.id == admin_id), None)

    def get_admin_by_username(
        self, store: RecordStore, username: str
    ) -> Admin | None:
        return next(
            (a for a in self.list_admins(store) if a.username == username), None
        )

    def replace_admins(self, store: RecordStore, admins: list[Admin]) -> None:
        store.save(ADMINS, [a.model_dump(mode="json") for a in admins])
