from __future__ import annotations

from typing import Literal

from pydantic import Field

from core.settings.base_settings import OrdersBaseSettings


class StorageSettings(OrdersBaseSettings):
    """
    Order storage settings.

    ``memory`` keeps orders in the process; ``sqlalchemy`` stores them in
    the database at ``database_url`` (any async SQLAlchemy driver).
    """

    backend: Literal["memory", "sqlalchemy"] = Field(
        "memory", alias="ORDERS_STORAGE_BACKEND"
    )
    database_url: str = Field(
        "sqlite+aiosqlite:///./orders.db", alias="ORDERS_DATABASE_URL"
    )
    echo_sql: bool = Field(False, alias="ORDERS_DATABASE_ECHO")
