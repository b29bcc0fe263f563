# shopverse/services/cart_service.py
from shopverse.core.errors import NotFoundError, ValidationError
from shopverse.models.cart import CartEntry
from shopverse.repositories.cart_repo import CartRepository
from shopverse.repositories.product_repo import ProductRepository
from shopverse.repositories.record_store import RecordStore
from shopverse.schemas.cart import CartEntryRead


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - validate product existence on add
      - merge repeated adds into one entry per product
      - drop entries whose quantity falls below 1
      - enrich entries with live catalog data at read time

    Every mutation rewrites the whole `carts` collection.
    """

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo

    # ---- public operations ----

    def get_cart(self, store: RecordStore, user_id: str) -> list[CartEntryRead]:
        """
        Return the user's entries, each with its current Product or None.

        Prices are whatever the catalog says now, not at add time.
        """
        entries = self.cart_repo.list_for_user(store, user_id)
        products = {p.id: p for p in self.product_repo.list_all(store)}

        return [
            CartEntryRead(
                product_id=e.product_id,
                quantity=e.quantity,
                product=products.get(e.product_id),
            )
            for e in entries
        ]

    def add(
        self,
        store: RecordStore,
        user_id: str,
        product_id: str,
        quantity: int,
    ) -> None:
        """
        Add a product to the user's cart.

        Rules:
          - product must exist in the catalog
          - quantity >= 1
          - an existing entry is increased, not replaced
        """
        if quantity < 1:
            raise ValidationError("Product ID and quantity are required")

        if self.product_repo.get_by_id(store, product_id) is None:
            raise NotFoundError("Product not found")

        carts = self.cart_repo.load_all(store)
        entries = carts.setdefault(user_id, [])

        existing = next((e for e in entries if e.product_id == product_id), None)
        if existing:
            existing.quantity += quantity
        else:
            entries.append(CartEntry(product_id=product_id, quantity=quantity))

        self.cart_repo.save_all(store, carts)

    def set_quantity(
        self,
        store: RecordStore,
        user_id: str,
        product_id: str,
        quantity: int,
    ) -> None:
        """
        Set (not add) the quantity of an item in the cart.

        quantity < 1 behaves exactly like remove().
        """
        if quantity < 1:
            self.remove(store, user_id, product_id)
            return

        carts = self.cart_repo.load_all(store)
        if user_id not in carts:
            raise NotFoundError("Cart not found")

        item = next((e for e in carts[user_id] if e.product_id == product_id), None)
        if not item:
            raise NotFoundError("Item not found in cart")

        item.quantity = quantity
        self.cart_repo.save_all(store, carts)

    def remove(self, store: RecordStore, user_id: str, product_id: str) -> None:
        """
        Remove a product from the cart.

        A user without a cart gets NotFoundError; removing an item that
        is not in an existing cart succeeds without changes.
        """
        carts = self.cart_repo.load_all(store)
        if user_id not in carts:
            raise NotFoundError("Cart not found")

        carts[user_id] = [e for e in carts[user_id] if e.product_id != product_id]
        self.cart_repo.save_all(store, carts)

    def clear(self, store: RecordStore, user_id: str) -> None:
        """Empty the cart, keeping it as an existing (empty) cart."""
        carts = self.cart_repo.load_all(store)
        carts[user_id] = []
        self.cart_repo.save_all(store, carts)
