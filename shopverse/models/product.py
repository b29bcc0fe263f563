# shopverse/models/product.py
import uuid

from sqlmodel import SQLModel, Field


def new_record_id() -> str:
    """Opaque, globally unique id for products, orders and users."""
    return uuid.uuid4().hex


class Product(SQLModel):
    """
    Catalog entry as stored in the `products` collection.

    Only the admin API creates, edits or deletes products. Carts and
    orders reference products by id without any integrity check.
    """

    id: str = Field(default_factory=new_record_id)
    name: str
    description: str
    price: float = Field(ge=0, description="Unit price")
    image: str = Field(description="Image URI")
    category: str
    stock: int = Field(default=0, ge=0, description="Units in stock")
