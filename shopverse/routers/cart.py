# shopverse/routers/cart.py
from fastapi import APIRouter, Depends

from shopverse.core.auth import require_user
from shopverse.database import get_store
from shopverse.repositories.cart_repo import CartRepository
from shopverse.repositories.product_repo import ProductRepository
from shopverse.repositories.record_store import RecordStore
from shopverse.schemas.cart import CartEntryRead, CartItemAdd, CartItemUpdate
from shopverse.schemas.common import MessageResponse
from shopverse.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.get("", response_model=list[CartEntryRead])
def get_my_cart(
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(require_user),
):
    """
    Get the current user's cart, each entry with its live product
    (or null if the product has been deleted).
    """
    return service.get_cart(store, user_id)


@router.post("/add", response_model=MessageResponse)
def add_to_cart(
    payload: CartItemAdd,
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(require_user),
):
    """
    Add a product to the current user's cart.

    Adding a product already in the cart increases its quantity.
    """
    service.add(store, user_id, payload.product_id, payload.quantity)
    return MessageResponse(message="Item added to cart")


@router.put("/update", response_model=MessageResponse)
def update_cart_item(
    payload: CartItemUpdate,
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(require_user),
):
    """
    Set the quantity of a product in the cart; below 1 removes it.
    """
    service.set_quantity(store, user_id, payload.product_id, payload.quantity)
    return MessageResponse(message="Cart updated")


@router.delete("/remove/{product_id}", response_model=MessageResponse)
def remove_cart_item(
    product_id: str,
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(require_user),
):
    """
    Remove a product from the cart.
    """
    service.remove(store, user_id, product_id)
    return MessageResponse(message="Item removed from cart")
