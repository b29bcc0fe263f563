# shopverse/models/cart.py
from sqlmodel import SQLModel, Field


class CartEntry(SQLModel):
    """
    One line of a user's cart.

    The `carts` collection maps user_id -> list[CartEntry]; product_id is
    unique within a list. Product data is NOT copied here, it is looked up
    at read time.
    """

    product_id: str
    quantity: int = Field(ge=1, description="Must be >= 1")
