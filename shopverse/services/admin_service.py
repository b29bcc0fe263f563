# shopverse/services/admin_service.py
import logging

from shopverse.core.errors import NotFoundError, ValidationError
from shopverse.models.order import Order
from shopverse.models.product import Product
from shopverse.repositories.order_repo import OrderRepository
from shopverse.repositories.product_repo import ProductRepository
from shopverse.repositories.record_store import RecordStore
from shopverse.repositories.user_repo import UserRepository
from shopverse.schemas.order import ORDER_STATUSES
from shopverse.schemas.product import PRODUCT_TEXT_FIELDS, ProductCreate, ProductUpdate
from shopverse.schemas.stats import AdminStats

logger = logging.getLogger(__name__)

# Allowed order status changes; delivered and cancelled are terminal.
ORDER_STATUS_TRANSITIONS: dict[str, set[str]] = {
    "pending": {"confirmed", "cancelled"},
    "confirmed": {"shipped", "cancelled"},
    "shipped": {"delivered"},
    "delivered": set(),
    "cancelled": set(),
}


def check_status_transition(current: str, new: str) -> None:
    """
    Raise ValidationError unless `current -> new` is allowed.

    Re-applying the current status is always allowed.
    """
    if new not in ORDER_STATUSES:
        raise ValidationError(
            f"Invalid status '{new}'. Allowed: {', '.join(ORDER_STATUSES)}"
        )
    if current == new:
        return
    if new not in ORDER_STATUS_TRANSITIONS.get(current, set()):
        raise ValidationError(f"Invalid status transition: {current} -> {new}")


class AdminService:
    """
    Privileged operations over products and orders.

    Callers must already have passed `require_admin`; nothing here
    checks identity.
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        user_repo: UserRepository,
    ):
        self.product_repo = product_repo
        self.order_repo = order_repo
        self.user_repo = user_repo

    # ----- Products -----

    def list_products(self, store: RecordStore) -> list[Product]:
        return self.product_repo.list_all(store)

    def create_product(self, store: RecordStore, payload: ProductCreate) -> Product:
        """
        Create a new product with a fresh id.

        Every text field must be non-blank; price and stock already went
        through numeric coercion in the schema.
        """
        if not all(getattr(payload, name) for name in PRODUCT_TEXT_FIELDS):
            raise ValidationError("All fields are required")

        product = Product(**payload.model_dump())

        products = self.product_repo.list_all(store)
        products.append(product)
        self.product_repo.save_all(store, products)

        logger.info("Product %s created (%s)", product.id, product.name)
        return product

    def update_product(
        self,
        store: RecordStore,
        product_id: str,
        payload: ProductUpdate,
    ) -> Product:
        """
        Partial update of a product.

        Only fields present in the request are applied. Explicit nulls and
        blank text are rejected; 0 is a valid price or stock.
        """
        changes = payload.supplied_fields()

        for name, value in changes.items():
            if value is None:
                raise ValidationError(f"{name} cannot be null")
            if name in PRODUCT_TEXT_FIELDS and not value:
                raise ValidationError(f"{name} cannot be empty")

        products = self.product_repo.list_all(store)
        index = next(
            (i for i, p in enumerate(products) if p.id == product_id), None
        )
        if index is None:
            raise NotFoundError("Product not found")

        updated = products[index].model_copy(update=changes)
        products[index] = updated
        self.product_repo.save_all(store, products)
        return updated

    def delete_product(self, store: RecordStore, product_id: str) -> None:
        """
        Delete a product.

        Orders keep their copied name/price; carts keep the entry, which
        then enriches to product=None.
        """
        products = self.product_repo.list_all(store)
        remaining = [p for p in products if p.id != product_id]

        if len(remaining) == len(products):
            raise NotFoundError("Product not found")

        self.product_repo.save_all(store, remaining)
        logger.info("Product %s deleted", product_id)

    # ----- Orders -----

    def list_orders(self, store: RecordStore) -> list[Order]:
        return self.order_repo.list_all(store)

    def set_status(self, store: RecordStore, order_id: str, status: str) -> Order:
        """
        Admin-only status update with a closed state machine:

          pending   -> confirmed, cancelled
          confirmed -> shipped, cancelled
          shipped   -> delivered
          delivered -> (no change)
          cancelled -> (no change)

        Unknown statuses and invalid transitions raise ValidationError.
        """
        orders = self.order_repo.list_all(store)
        order = next((o for o in orders if o.id == order_id), None)
        if not order:
            raise NotFoundError("Order not found")

        check_status_transition(order.status, status)

        if order.status == status:
            return order

        previous = order.status
        order.status = status
        self.order_repo.save_all(store, orders)

        logger.info("Order %s status %s -> %s", order_id, previous, status)
        return order

    # ----- Stats -----

    def stats(self, store: RecordStore) -> AdminStats:
        return AdminStats(
            users=self.user_repo.count(store),
            products=self.product_repo.count(store),
            orders=self.order_repo.count(store),
        )
