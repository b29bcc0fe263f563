# shopverse/schemas/cart.py
from sqlmodel import SQLModel, Field

from shopverse.models.product import Product


class CartItemAdd(SQLModel):
    """
    Payload for adding to cart.
    """

    product_id: str = Field(min_length=1)
    quantity: int = Field(ge=1)


class CartItemUpdate(SQLModel):
    """
    Payload for setting the quantity of a cart item.

    quantity < 1 removes the item instead of being rejected.
    """

    product_id: str = Field(min_length=1)
    quantity: int


class CartEntryRead(SQLModel):
    """
    Cart entry enriched with the current catalog record.

    product is None when the product was deleted after being added;
    such entries do not count towards totals.
    """

    product_id: str
    quantity: int
    product: Product | None = None
