"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base, ExactDecimal, UTCDateTime


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    order_id = Column(String(36), primary_key=True)
    customer_name = Column(String(255), nullable=False)
    customer_email = Column(String(255), nullable=False, index=True)
    total_amount = Column(ExactDecimal, nullable=False)
    status = Column(String(20), nullable=False, default="Pending")
    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=True)

    # Relationship to items
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
        lazy="selectin",
    )


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(36), ForeignKey("orders.order_id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    product_id = Column(String(36), nullable=False)
    product_name = Column(String(500), nullable=False)
    price = Column(ExactDecimal, nullable=False)
    quantity = Column(Integer, nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")
