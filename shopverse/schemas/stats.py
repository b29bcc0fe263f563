# shopverse/schemas/stats.py
from pydantic import ConfigDict
from sqlmodel import SQLModel


class AdminStats(SQLModel):
    """
    Collection sizes for the admin dashboard, recomputed per request.
    """

    model_config = ConfigDict(extra="forbid")

    users: int
    products: int
    orders: int
