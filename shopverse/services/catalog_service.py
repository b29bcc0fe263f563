# shopverse/services/catalog_service.py
from shopverse.core.errors import NotFoundError
from shopverse.models.product import Product
from shopverse.repositories.product_repo import ProductRepository
from shopverse.repositories.record_store import RecordStore


class CatalogService:
    """
    Read-only view over the product collection.

    Mutations go through AdminService.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(
        self,
        store: RecordStore,
        category: str | None = None,
        search: str | None = None,
    ) -> list[Product]:
        """
        List products in stored order.

        - category: exact match
        - search: case-insensitive substring of name OR description
        Both filters combine with AND; no match gives an empty list.
        """
        products = self.repo.list_all(store)

        if category:
            products = [p for p in products if p.category == category]

        if search:
            term = search.lower()
            products = [
                p
                for p in products
                if term in p.name.lower() or term in p.description.lower()
            ]

        return products

    def get_product(self, store: RecordStore, product_id: str) -> Product:
        product = self.repo.get_by_id(store, product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product
