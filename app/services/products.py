"""Product inventory operations with role checks and price coercion."""

import logging
import math
import re
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from app.core.permissions import Permission, Role, has_permission
from app.models import Product
from app.schemas.product import ProductFields

logger = logging.getLogger(__name__)

_NON_PRICE_CHARS = re.compile(r"[^0-9.]")

# Fields a single-product create takes from the body; isActive is not among them.
CREATE_FIELDS = ("name", "description", "image_url", "category", "stock")


class ProductServiceError(Exception):
    """Base for caller-facing product operation failures."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ProductPermissionError(ProductServiceError):
    """Caller's role lacks the manage-products permission."""

    status_code = 403


class ProductValidationError(ProductServiceError):
    """Request payload cannot produce a valid product."""

    status_code = 400


def coerce_price(raw: Any) -> float | None:
    """
    Best-effort price parsing: drop every character that is not a digit or '.',
    then parse. Returns None for unparseable, empty or zero input.

    "$12.50 each" -> 12.5, "abc" -> None, "1.2.3" -> None. Objects, arrays, booleans
    and values too large to be finite are rejected.
    """
    if isinstance(raw, (dict, list, bool)):
        return None
    cleaned = _NON_PRICE_CHARS.sub("", str(raw))
    try:
        price = float(cleaned)
    except ValueError:
        return None
    if not price or not math.isfinite(price):
        return None
    return price


def _require_manage(role: Role | str, message: str) -> None:
    if not has_permission(role, Permission.MANAGE_PRODUCTS):
        raise ProductPermissionError(message)


def _present(fields: dict[str, Any]) -> dict[str, Any]:
    """Drop explicit nulls so schema defaults apply."""
    return {k: v for k, v in fields.items() if v is not None}


def _validate_fields(item: dict[str, Any], where: str = "") -> ProductFields:
    try:
        return ProductFields.model_validate(_present(item))
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first["loc"])
        raise ProductValidationError(f"Invalid product{where}: {loc}: {first['msg']}") from e


def list_active_products(db: Session) -> list[Product]:
    """All active products, newest first. No pagination."""
    return (
        db.query(Product)
        .filter(Product.is_active.is_(True))
        .order_by(Product.created_at.desc())
        .all()
    )


def create_product(db: Session, role: Role | str, fields: Any) -> Product:
    """Create one product for an Admin/SuperAdmin caller."""
    _require_manage(role, "Only Admin can add products")
    if not isinstance(fields, dict):
        raise ProductValidationError("Name and price required")

    price = coerce_price(fields.get("price"))
    if price is None:
        raise ProductValidationError("Invalid price")
    if not fields.get("name"):
        raise ProductValidationError("Name and price required")

    # Accept both camelCase (wire) and snake_case keys.
    raw = {
        name: fields.get(to_camel(name), fields.get(name))
        for name in CREATE_FIELDS
    }
    validated = _validate_fields({**raw, "price": price})

    product = Product(**validated.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Product created id=%s name=%r", product.id, product.name)
    return product


def delete_product(db: Session, role: Role | str, product_id: str) -> None:
    """Delete by id. Deleting an id that does not exist is a success."""
    _require_manage(role, "Only Admin can delete products")
    deleted = (
        db.query(Product)
        .filter(Product.id == product_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info("Product delete id=%s rows=%s", product_id, deleted)


def bulk_create_products(db: Session, role: Role | str, items: Any) -> list[Product]:
    """
    Insert many products in one transaction.

    All-or-nothing: every item is validated before anything is written, and one
    bad item rejects the whole request.
    """
    _require_manage(role, "Only Admin can add products")
    if not isinstance(items, list) or not items:
        raise ProductValidationError("Send array of products")

    validated: list[ProductFields] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ProductValidationError(f"Product at index {i} must be an object")
        validated.append(_validate_fields(item, where=f" at index {i}"))

    products = [Product(**v.model_dump()) for v in validated]
    db.add_all(products)
    db.commit()
    for product in products:
        db.refresh(product)
    logger.info("Bulk product create: count=%s", len(products))
    return products
