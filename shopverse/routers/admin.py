# shopverse/routers/admin.py
from fastapi import APIRouter, Depends, status

from shopverse.core.auth import require_admin, resolve_admin
from shopverse.database import get_store
from shopverse.models.order import Order
from shopverse.models.product import Product
from shopverse.repositories.order_repo import OrderRepository
from shopverse.repositories.product_repo import ProductRepository
from shopverse.repositories.record_store import RecordStore
from shopverse.repositories.user_repo import UserRepository
from shopverse.schemas.common import MessageResponse
from shopverse.schemas.order import OrderStatusUpdate
from shopverse.schemas.product import ProductCreate, ProductUpdate
from shopverse.schemas.stats import AdminStats
from shopverse.schemas.user import (
    AdminAuthResponse,
    AdminLoginInput,
    CurrentAdminResponse,
)
from shopverse.services.admin_service import AdminService
from shopverse.services.user_service import UserService

router = APIRouter(prefix="/admin", tags=["Admin"])

product_repo = ProductRepository()
order_repo = OrderRepository()
user_repo = UserRepository()
service = AdminService(product_repo, order_repo, user_repo)
user_service = UserService(user_repo)


# -------- Session --------


@router.post("/login", response_model=AdminAuthResponse)
def admin_login(
    payload: AdminLoginInput,
    store: RecordStore = Depends(get_store),
):
    """
    Exchange admin username + password for a bearer token.
    """
    return user_service.admin_login(store, payload.username, payload.password)


@router.get("/status", response_model=CurrentAdminResponse)
def admin_status(
    store: RecordStore = Depends(get_store),
    admin_id: str | None = Depends(resolve_admin),
):
    """
    Return the authenticated admin, or `{"admin": null}`.
    """
    return CurrentAdminResponse(admin=user_service.get_admin(store, admin_id))


@router.get(
    "/stats",
    response_model=AdminStats,
    dependencies=[Depends(require_admin)],
)
def get_stats(store: RecordStore = Depends(get_store)):
    """
    Number of users, products and orders.
    """
    return service.stats(store)


# -------- Products --------


@router.get(
    "/products",
    response_model=list[Product],
    dependencies=[Depends(require_admin)],
)
def list_products(store: RecordStore = Depends(get_store)):
    return service.list_products(store)


@router.post(
    "/products",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_product(
    payload: ProductCreate,
    store: RecordStore = Depends(get_store),
):
    """
    Create a new product (admin only). All fields are required.
    """
    return service.create_product(store, payload)


@router.put(
    "/products/{product_id}",
    response_model=Product,
    dependencies=[Depends(require_admin)],
)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    store: RecordStore = Depends(get_store),
):
    """
    Update an existing product (admin only).

    Only fields present in the body are changed.
    """
    return service.update_product(store, product_id, payload)


@router.delete(
    "/products/{product_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
def delete_product(
    product_id: str,
    store: RecordStore = Depends(get_store),
):
    """
    Delete a product (admin only). Existing orders are not affected.
    """
    service.delete_product(store, product_id)
    return MessageResponse(message="Product deleted successfully")


# -------- Orders --------


@router.get(
    "/orders",
    response_model=list[Order],
    dependencies=[Depends(require_admin)],
)
def list_all_orders(store: RecordStore = Depends(get_store)):
    """
    List all orders (admin only).
    """
    return service.list_orders(store)


@router.put(
    "/orders/{order_id}/status",
    response_model=Order,
    dependencies=[Depends(require_admin)],
)
def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    store: RecordStore = Depends(get_store),
):
    """
    Update order status (admin only).

      pending   -> confirmed, cancelled
      confirmed -> shipped, cancelled
      shipped   -> delivered
      delivered, cancelled -> (no change)
    """
    return service.set_status(store, order_id, payload.status)
