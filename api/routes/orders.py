"""
Orders REST endpoints.

Translates HTTP/JSON requests into use case calls. Domain errors are
mapped to HTTP status codes by the handlers registered in api.main.
"""
from fastapi import APIRouter, Depends, HTTPException, Response, status
from uuid import UUID
import logging

from api.dependencies import (
    get_create_order_use_case,
    get_get_order_use_case,
    get_order_repository,
    get_update_order_status_use_case,
)
from core.application.dtos.order_dto import (
    CreateOrderRequest,
    OrderDTO,
    OrderListDTO,
    UpdateOrderStatusRequest,
)
from core.application.use_cases import (
    CreateOrderUseCase,
    GetOrderUseCase,
    UpdateOrderStatusUseCase,
)
from core.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)
router = APIRouter()


def _parse_order_id(order_id: str) -> UUID:
    try:
        return UUID(order_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid order ID: {order_id}",
        )


@router.post(
    "",
    response_model=OrderDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create an order",
)
async def create_order(
    request: CreateOrderRequest,
    response: Response,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
) -> OrderDTO:
    """
    Place a new Pending order.

    **Errors:**
    - 400: blank customer name/email, no items, quantity <= 0 or negative price
    - 502: order saved but confirmation could not be sent
    """
    order = await use_case.execute(request.to_command())
    response.headers["Location"] = f"/api/orders/{order.id}"
    return OrderDTO.from_domain(order)


@router.get(
    "",
    response_model=OrderListDTO,
    summary="List all orders",
)
async def list_orders(
    repository: OrderRepository = Depends(get_order_repository),
) -> OrderListDTO:
    """List every stored order."""
    orders = await repository.get_all()
    return OrderListDTO(
        orders=[OrderDTO.from_domain(order) for order in orders],
        total=len(orders),
    )


@router.get(
    "/{order_id}",
    response_model=OrderDTO,
    summary="Get an order",
)
async def get_order(
    order_id: str,
    use_case: GetOrderUseCase = Depends(get_get_order_use_case),
) -> OrderDTO:
    """Get order by ID (404 when it does not exist)."""
    order = await use_case.execute(_parse_order_id(order_id))
    if order is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Order {order_id} not found",
        )
    return OrderDTO.from_domain(order)


@router.patch(
    "/{order_id}/status",
    response_model=OrderDTO,
    summary="Change order status",
)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
) -> OrderDTO:
    """
    Move an order to Confirmed, Cancelled or Delivered.

    **Errors:**
    - 400: unknown status, Pending requested, or transition not allowed
    - 404: order does not exist
    """
    order = await use_case.execute(_parse_order_id(order_id), request.status)
    return OrderDTO.from_domain(order)
