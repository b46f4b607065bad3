"""Order item value object."""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from uuid import UUID

from ..exceptions import InvalidItemError


@dataclass(frozen=True)
class OrderItem:
    """
    Immutable line item owned by exactly one Order.

    CRITICAL: Prices are always Decimal, never float!
    """
    product_id: UUID
    product_name: str
    price: Decimal
    quantity: int

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.price, Decimal):
            try:
                object.__setattr__(self, 'price', Decimal(str(self.price)))
            except InvalidOperation as e:
                raise InvalidItemError(f"Price is not a valid amount: {self.price!r}") from e
        if not self.price.is_finite():
            raise InvalidItemError(f"Price is not a valid amount: {self.price!r}")

        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidItemError(f"Quantity must be an integer, got: {self.quantity!r}")

        if self.quantity <= 0:
            raise InvalidItemError(
                f"Quantity must be greater than zero, got: {self.quantity}"
            )

        if self.price < 0:
            raise InvalidItemError(f"Price cannot be negative, got: {self.price}")

    @property
    def subtotal(self) -> Decimal:
        """Price multiplied by quantity."""
        return self.price * self.quantity
