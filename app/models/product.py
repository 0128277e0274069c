"""ORM model for inventory products."""

from sqlalchemy import Boolean, Column, Float, Integer, String, Text

from app.models.base import Base, RecordMixin


class Product(RecordMixin, Base):
    """Inventory record. Listed publicly when is_active; newest first."""

    __tablename__ = "products"

    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(2048), nullable=False, default="")
    category = Column(String(255), nullable=False, default="General")
    stock = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
