# setup_admin.py

from shopverse.core.config import get_settings
from shopverse.database import build_store
from shopverse.repositories.user_repo import UserRepository
from shopverse.services.user_service import UserService


def main():
    settings = get_settings()
    store = build_store()
    store.setup()

    UserService(UserRepository()).setup_admin(
        store, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD
    )

    print("Admin account created successfully!")
    print(f"Username: {settings.ADMIN_USERNAME}")
    print("Password: (ADMIN_PASSWORD from settings)")


if __name__ == "__main__":
    main()
