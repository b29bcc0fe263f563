# shopverse/schemas/product.py
from pydantic import ConfigDict, FiniteFloat, field_validator
from sqlmodel import SQLModel, Field

PRODUCT_TEXT_FIELDS = ("name", "description", "image", "category")


class ProductCreate(SQLModel):
    """
    Payload for creating a product (admin only).

    All fields are required. price and stock accept numeric strings
    ("12.50", "3") and are stored as numbers. stock must be a whole number;
    fractional values such as "2.5" are rejected, not truncated. price
    must be finite. Blank strings are rejected by AdminService.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str
    price: FiniteFloat = Field(ge=0)
    image: str
    category: str
    stock: int = Field(ge=0)

    @field_validator(*PRODUCT_TEXT_FIELDS)
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class ProductUpdate(SQLModel):
    """
    Partial update payload for products.

    Presence is tracked with `model_fields_set`, not by value: a price
    or stock of 0 is applied, an omitted field is left untouched.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None
    price: FiniteFloat | None = Field(default=None, ge=0)
    image: str | None = None
    category: str | None = None
    stock: int | None = Field(default=None, ge=0)

    @field_validator(*PRODUCT_TEXT_FIELDS)
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return v.strip()

    def supplied_fields(self) -> dict:
        """Fields explicitly present in the request, including zero values."""
        return {name: getattr(self, name) for name in self.model_fields_set}
