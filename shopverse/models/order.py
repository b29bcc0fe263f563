# shopverse/models/order.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field

from shopverse.models.product import new_record_id


class ShippingInfo(SQLModel):
    """Delivery contact captured at checkout."""

    name: str
    address: str
    phone: str
    email: str | None = None


class OrderItem(SQLModel):
    """
    Line item inside an order.

    product_name and price are copied from the catalog at checkout so
    later product edits or deletion never change the order.
    """

    product_id: str
    product_name: str
    quantity: int
    price: float
    subtotal: float


class Order(SQLModel):
    """
    Customer order as stored in the `orders` collection.

    Immutable after creation except for `status`, which only the admin
    API changes. status is kept as a plain string on load so records
    written with an unknown value still parse.
    """

    id: str = Field(default_factory=new_record_id)
    user_id: str
    items: list[OrderItem]
    subtotal: float
    tax: float
    shipping: float
    total: float
    shipping_info: ShippingInfo
    status: str = "pending"
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
