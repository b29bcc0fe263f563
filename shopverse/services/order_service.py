# shopverse/services/order_service.py
import logging

from shopverse.core.errors import EmptyCartError, ValidationError
from shopverse.models.order import Order, OrderItem, ShippingInfo
from shopverse.repositories.cart_repo import CartRepository
from shopverse.repositories.order_repo import OrderRepository
from shopverse.repositories.product_repo import ProductRepository
from shopverse.repositories.record_store import RecordStore
from shopverse.schemas.order import OrderCreate
from shopverse.services.cart_service import CartService

logger = logging.getLogger(__name__)

# Fixed rates, no per-category or per-region variation
TAX_RATE = 0.10
SHIPPING_FLAT = 10.00

UNKNOWN_PRODUCT_NAME = "Unknown"


def compute_totals(subtotal: float) -> dict[str, float]:
    """
    subtotal/tax/shipping/total for an order, each rounded to cents.

    total is computed from the unrounded parts and rounded once.
    """
    tax = subtotal * TAX_RATE
    return {
        "subtotal": round(subtotal, 2),
        "tax": round(tax, 2),
        "shipping": round(SHIPPING_FLAT, 2),
        "total": round(subtotal + tax + SHIPPING_FLAT, 2),
    }


class OrderService:
    """
    Business logic for checkout and order history.

    Responsibilities:
      - Snapshot the cart into an Order (names and prices copied)
      - Compute subtotal, tax, shipping and total
      - Clear the cart after the order is stored
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ):
        self.order_repo = order_repo
        self.cart_repo = cart_repo
        self.product_repo = product_repo
        self.cart_service = CartService(cart_repo, product_repo)

    def place_order(
        self,
        store: RecordStore,
        user_id: str,
        payload: OrderCreate,
    ) -> Order:
        """
        Convert the current user's cart into an Order.

        Steps:
          1. Validate shipping fields.
          2. Load cart entries; error if empty.
          3. Read the catalog once and copy name/price per entry
             (deleted products become "Unknown" at price 0).
          4. Compute totals.
          5. Append the order and persist `orders`.
          6. Clear the cart and persist `carts`.

        Steps 5 and 6 are separate writes: a failure between them leaves
        the order stored and the cart still full.
        """
        # 1) Shipping info
        if not (payload.name and payload.address and payload.phone):
            raise ValidationError("All shipping fields are required")

        # 2) Load cart
        cart_entries = self.cart_repo.list_for_user(store, user_id)
        if not cart_entries:
            raise EmptyCartError()

        # 3) Materialize items from the catalog
        products = {p.id: p for p in self.product_repo.list_all(store)}

        items: list[OrderItem] = []
        subtotal = 0.0
        for entry in cart_entries:
            product = products.get(entry.product_id)
            price = product.price if product else 0.0
            line_total = price * entry.quantity
            subtotal += line_total
            items.append(
                OrderItem(
                    product_id=entry.product_id,
                    product_name=product.name if product else UNKNOWN_PRODUCT_NAME,
                    quantity=entry.quantity,
                    price=price,
                    subtotal=round(line_total, 2),
                )
            )

        # 4) Totals
        totals = compute_totals(subtotal)

        # 5) Store the order
        order = Order(
            user_id=user_id,
            items=items,
            shipping_info=ShippingInfo(
                name=payload.name,
                address=payload.address,
                phone=payload.phone,
                email=payload.email,
            ),
            status="pending",
            **totals,
        )
        self.order_repo.append(store, order)

        # 6) Clear cart
        self.cart_service.clear(store, user_id)

        logger.info(
            "Order %s placed by user %s (%d items, total %.2f)",
            order.id,
            user_id,
            len(items),
            order.total,
        )
        return order

    def list_orders(self, store: RecordStore, user_id: str) -> list[Order]:
        """
        List orders for the given user, oldest first.
        """
        return self.order_repo.list_for_user(store, user_id)
