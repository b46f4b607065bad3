"""Static mappers for domain entities ↔ database models."""

from uuid import UUID

from core.domain.entities.order import Order
from core.domain.enums.order_status import OrderStatus
from core.domain.value_objects import OrderItem

from .models.order_model import OrderItemModel, OrderModel


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain value.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem value object
        """
        return OrderItem(
            product_id=UUID(model.product_id),
            product_name=model.product_name,
            price=model.price,
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str, position: int) -> OrderItemModel:
        """Convert domain value to ORM model.

        Args:
            entity: OrderItem value object
            order_id: Order ID string
            position: Index of the item within the order

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            order_id=order_id,
            position=position,
            product_id=str(entity.product_id),
            product_name=entity.product_name,
            price=entity.price,
            quantity=entity.quantity,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        The stored total is restored as-is, never recomputed.

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        return Order(
            id=UUID(model.order_id),
            customer_name=model.customer_name,
            customer_email=model.customer_email,
            items=tuple(OrderItemMapper.to_domain(item) for item in model.items),
            total_amount=model.total_amount,
            status=OrderStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_id = str(entity.id)
        order_model = OrderModel(
            order_id=order_id,
            customer_name=entity.customer_name,
            customer_email=entity.customer_email,
            total_amount=entity.total_amount,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        order_model.items = [
            OrderItemMapper.to_persistence(item, order_id, position)
            for position, item in enumerate(entity.items)
        ]
        return order_model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update existing ORM model from domain entity (for updates).

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.customer_name = entity.customer_name
        model.customer_email = entity.customer_email
        model.total_amount = entity.total_amount
        model.status = entity.status.value
        model.created_at = entity.created_at
        model.updated_at = entity.updated_at

        # Items are immutable once the order exists; rebuild only if they differ
        current_items = tuple(OrderItemMapper.to_domain(item) for item in model.items)
        if current_items != entity.items:
            model.items = [
                OrderItemMapper.to_persistence(item, model.order_id, position)
                for position, item in enumerate(entity.items)
            ]

        return model
