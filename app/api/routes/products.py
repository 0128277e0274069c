"""Product endpoints: public listing, Admin/SuperAdmin create, delete and bulk create."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser, MessageResponse
from app.schemas.product import ProductBulkResponse, ProductCreatedResponse, ProductRead
from app.services.products import (
    ProductServiceError,
    bulk_create_products,
    create_product,
    delete_product,
    list_active_products,
)

router = APIRouter()

# Bodies are taken as raw JSON so the role check runs before any payload validation.
RawBody = Annotated[Any, Body()]


@router.get("", response_model=list[ProductRead])
def list_products(db: Annotated[Session, Depends(get_db)]) -> list[ProductRead]:
    """Active products, newest first. No auth."""
    return [ProductRead.model_validate(p) for p in list_active_products(db)]


@router.post("", response_model=ProductCreatedResponse)
def post_product(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    payload: RawBody = None,
) -> ProductCreatedResponse:
    """Create a product. Price strings like "$12.50" are coerced to numbers."""
    try:
        product = create_product(db, current_user.role, payload)
    except ProductServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return ProductCreatedResponse(
        message="Product created",
        product=ProductRead.model_validate(product),
    )


@router.post("/bulk", response_model=ProductBulkResponse)
def post_products_bulk(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    payload: RawBody = None,
) -> ProductBulkResponse:
    """Create many products from a JSON array; all are inserted or none."""
    try:
        created = bulk_create_products(db, current_user.role, payload)
    except ProductServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return ProductBulkResponse(
        message=f"{len(created)} products added",
        created=[ProductRead.model_validate(p) for p in created],
    )


@router.delete("/{product_id}", response_model=MessageResponse)
def remove_product(
    product_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    try:
        delete_product(db, current_user.role, product_id)
    except ProductServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return MessageResponse(message="Product deleted")
