# shopverse/schemas/order.py
from typing import Literal, get_args

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

OrderStatus = Literal["pending", "confirmed", "shipped", "delivered", "cancelled"]
ORDER_STATUSES: tuple[str, ...] = get_args(OrderStatus)


class OrderCreate(SQLModel):
    """
    Shipping details for creating an order from the current cart.

    User provides:
      - name, address, phone (required, checked by OrderService)
      - email (optional)

    Backend derives:
      - user_id from token
      - status = 'pending'
      - items and totals from cart + catalog
    """

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    address: str = ""
    phone: str = ""
    email: str | None = None

    @field_validator("name", "address", "phone")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        return v or None


class OrderStatusUpdate(SQLModel):
    """
    Admin payload to change order status.
    """

    model_config = ConfigDict(extra="forbid")

    status: OrderStatus
