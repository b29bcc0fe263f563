# shopverse/repositories/product_repo.py
from shopverse.models.product import Product
from shopverse.repositories.record_store import PRODUCTS, RecordStore


class ProductRepository:
    """
    Data access layer for the `products` collection.

    - Whole-collection load/save through the record store.
    - No FastAPI, no business logic.
    """

    def list_all(self, store: RecordStore) -> list[Product]:
        return [Product.model_validate(raw) for raw in store.load(PRODUCTS)]

    def save_all(self, store: RecordStore, products: list[Product]) -> None:
        store.save(PRODUCTS, [p.model_dump(mode="json") for p in products])

    def get_by_id(self, store: RecordStore, product_id: str) -> Product | None:
        return next((p for p in self.list_all(store) if p.id == product_id), None)

    def count(self, store: RecordStore) -> int:
        return len(store.load(PRODUCTS))
