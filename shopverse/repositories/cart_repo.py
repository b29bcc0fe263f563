# shopverse/repositories/cart_repo.py
from shopverse.models.cart import CartEntry
from shopverse.repositories.record_store import CARTS, RecordStore


class CartRepository:
    """
    Data access layer for the `carts` collection (user_id -> entries).

    A user id missing from the mapping means "no cart"; an empty list
    means "cart exists but is empty" (e.g. right after checkout).
    """

    def load_all(self, store: RecordStore) -> dict[str, list[CartEntry]]:
        return {
            user_id: [CartEntry.model_validate(raw) for raw in entries]
            for user_id, entries in store.load(CARTS).items()
        }

    def save_all(
        self,
        store: RecordStore,
        carts: dict[str, list[CartEntry]],
    ) -> None:
        store.save(
            CARTS,
            {
                user_id: [e.model_dump(mode="json") for e in entries]
                for user_id, entries in carts.items()
            },
        )

    def list_for_user(self, store: RecordStore, user_id: str) -> list[CartEntry]:
        return self.load_all(store).get(user_id, [])
