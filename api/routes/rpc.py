"""
Orders RPC endpoint (JSON-RPC 2.0 over HTTP).

Exposes the same use cases as the REST API:

- ``CreateOrder``: {"customer_name", "customer_email", "items": [...]}
- ``GetOrder``: {"order_id"}
- ``UpdateOrderStatus``: {"order_id", "status"}

Errors carry a gRPC-style status name in ``error.data.status``.
"""
from typing import Any, Awaitable, Callable, Dict, Optional
from uuid import UUID
import json
import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.dependencies import (
    get_create_order_use_case,
    get_get_order_use_case,
    get_update_order_status_use_case,
)
from core.application.dtos.order_dto import CreateOrderRequest, OrderDTO
from core.application.use_cases import (
    CreateOrderUseCase,
    GetOrderUseCase,
    UpdateOrderStatusUseCase,
)
from core.domain.exceptions import (
    InvalidTransitionError,
    NotificationDeliveryError,
    OrderDomainError,
    OrderNotFoundError,
)


logger = logging.getLogger(__name__)
router = APIRouter()


# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
APPLICATION_ERROR = -32000


class RpcError(Exception):
    """Error returned to the RPC caller."""

    def __init__(
        self,
        code: int,
        message: str,
        status: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.data = data or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "data": {"status": self.status, **self.data},
        }


def _from_domain_error(exc: OrderDomainError) -> RpcError:
    """Map a domain error to an RPC error."""
    if isinstance(exc, OrderNotFoundError):
        return RpcError(APPLICATION_ERROR, str(exc), "NOT_FOUND")
    if isinstance(exc, InvalidTransitionError):
        return RpcError(APPLICATION_ERROR, str(exc), "FAILED_PRECONDITION")
    if isinstance(exc, NotificationDeliveryError):
        data = {}
        if exc.order is not None:
            data["order"] = OrderDTO.from_domain(exc.order).model_dump(mode="json")
        return RpcError(APPLICATION_ERROR, str(exc), "UNAVAILABLE", data)
    return RpcError(INVALID_PARAMS, str(exc), "INVALID_ARGUMENT")


def _order_id_param(params: Dict[str, Any]) -> UUID:
    try:
        return UUID(str(params["order_id"]))
    except (KeyError, ValueError):
        raise RpcError(INVALID_PARAMS, "Invalid order ID", "INVALID_ARGUMENT")


def _response(request_id: Any, *, result: Any = None, error: Optional[RpcError] = None) -> JSONResponse:
    body: Dict[str, Any] = {"jsonrpc": "2.0", "id": request_id}
    if error is not None:
        body["error"] = error.to_dict()
    else:
        body["result"] = result
    return JSONResponse(content=body)


@router.post("", summary="JSON-RPC 2.0 endpoint")
async def handle_rpc(
    request: Request,
    create_order: CreateOrderUseCase = Depends(get_create_order_use_case),
    get_order: GetOrderUseCase = Depends(get_get_order_use_case),
    update_order_status: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
) -> Response:
    """Dispatch one JSON-RPC call to the matching use case."""

    async def _create(params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            payload = CreateOrderRequest.model_validate(params)
        except ValidationError as e:
            raise RpcError(INVALID_PARAMS, "Invalid CreateOrder parameters", "INVALID_ARGUMENT",
                           {"errors": json.loads(e.json())})
        order = await create_order.execute(payload.to_command())
        return OrderDTO.from_domain(order).model_dump(mode="json")

    async def _get(params: Dict[str, Any]) -> Dict[str, Any]:
        order_id = _order_id_param(params)
        order = await get_order.execute(order_id)
        if order is None:
            raise RpcError(APPLICATION_ERROR, f"Order {order_id} not found", "NOT_FOUND")
        return OrderDTO.from_domain(order).model_dump(mode="json")

    async def _update_status(params: Dict[str, Any]) -> Dict[str, Any]:
        order_id = _order_id_param(params)
        target = params.get("status")
        if not isinstance(target, str):
            raise RpcError(INVALID_PARAMS, "Invalid status", "INVALID_ARGUMENT")
        order = await update_order_status.execute(order_id, target)
        return OrderDTO.from_domain(order).model_dump(mode="json")

    methods: Dict[str, Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]] = {
        "CreateOrder": _create,
        "GetOrder": _get,
        "UpdateOrderStatus": _update_status,
    }

    try:
        payload = json.loads(await request.body())
    except ValueError:
        return _response(None, error=RpcError(PARSE_ERROR, "Parse error", "INVALID_ARGUMENT"))

    if (
        not isinstance(payload, dict)
        or payload.get("jsonrpc") != "2.0"
        or not isinstance(payload.get("method"), str)
    ):
        return _response(None, error=RpcError(INVALID_REQUEST, "Invalid request", "INVALID_ARGUMENT"))

    request_id = payload.get("id")
    is_notification = "id" not in payload
    method = payload["method"]
    params = payload.get("params") or {}

    logger.info(f"RPC call: {method} (id={request_id})")

    try:
        handler = methods.get(method)
        if handler is None:
            raise RpcError(METHOD_NOT_FOUND, f"Method not found: {method}", "UNIMPLEMENTED")
        if not isinstance(params, dict):
            raise RpcError(INVALID_PARAMS, "Params must be an object", "INVALID_ARGUMENT")
        result = await handler(params)
    except RpcError as e:
        logger.warning(f"RPC {method} failed: {e.status} - {e.message}")
        error = e
    except OrderDomainError as e:
        error = _from_domain_error(e)
        logger.warning(f"RPC {method} failed: {error.status} - {error.message}")
    else:
        if is_notification:
            return Response(status_code=204)
        return _response(request_id, result=result)

    if is_notification:
        return Response(status_code=204)
    return _response(request_id, error=error)
