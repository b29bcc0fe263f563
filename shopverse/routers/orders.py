# shopverse/routers/orders.py
from fastapi import APIRouter, Depends

from shopverse.core.auth import require_user
from shopverse.database import get_store
from shopverse.models.order import Order
from shopverse.repositories.cart_repo import CartRepository
from shopverse.repositories.order_repo import OrderRepository
from shopverse.repositories.product_repo import ProductRepository
from shopverse.repositories.record_store import RecordStore
from shopverse.schemas.order import OrderCreate
from shopverse.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

order_repo = OrderRepository()
cart_repo = CartRepository()
product_repo = ProductRepository()
service = OrderService(order_repo, cart_repo, product_repo)


@router.post("", response_model=Order)
def checkout(
    payload: OrderCreate,
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(require_user),
):
    """
    Create an order from the current user's cart, then empty the cart.
    """
    return service.place_order(store, user_id, payload)


@router.get("", response_model=list[Order])
def list_my_orders(
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(require_user),
):
    """
    List the authenticated user's orders.
    """
    return service.list_orders(store, user_id)
