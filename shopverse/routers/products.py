# shopverse/routers/products.py
from fastapi import APIRouter, Depends

from shopverse.database import get_store
from shopverse.models.product import Product
from shopverse.repositories.product_repo import ProductRepository
from shopverse.repositories.record_store import RecordStore
from shopverse.services.catalog_service import CatalogService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = CatalogService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[Product])
def list_products(
    category: str | None = None,
    search: str | None = None,
    store: RecordStore = Depends(get_store),
):
    """
    List products.

    - Public endpoint.
    - `category` filters by exact category.
    - `search` matches name or description, case-insensitive.
    """
    return service.list_products(store, category=category, search=search)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    store: RecordStore = Depends(get_store),
):
    """
    Get a single product by id.

    - Public endpoint.
    """
    return service.get_product(store, product_id)
