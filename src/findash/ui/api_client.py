"""Typed async HTTP client for the dashboard view.

Only imports from ``findash.api.schemas``; never ORM or DB.
Use as an async context manager so the connection pool is closed with the view.
"""
from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter

from findash.config import settings
from findash.api.schemas.dashboard import ChartSeries, DashboardSummary
from findash.api.schemas.transactions import (
    CategoryCreate, CategoryRead, RecentTransaction, TransactionCreate,
)


_TRANSACTIONS = TypeAdapter(list[RecentTransaction])
_CATEGORIES = TypeAdapter(list[CategoryRead])


class APIError(Exception):
    """Raised when the backend returns a 4xx/5xx response."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"[{status_code}] {detail}")


class FinanceClient:
    """One coroutine per backend endpoint.  All return pure Pydantic DTOs."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def __aenter__(self) -> "FinanceClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            detail = resp.json().get("detail", resp.text)
        except (ValueError, AttributeError):
            detail = resp.text
        raise APIError(resp.status_code, str(detail))

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    async def get_dashboard(self) -> DashboardSummary:
        resp = await self._client.get("/api/dashboard")
        self._raise_for_status(resp)
        return DashboardSummary.model_validate(resp.json())

    async def get_chart(self, days: int = 90) -> ChartSeries:
        resp = await self._client.get("/api/dashboard/chart", params={"days": days})
        self._raise_for_status(resp)
        return ChartSeries.model_validate(resp.json())

    # ------------------------------------------------------------------
    # Transactions & categories
    # ------------------------------------------------------------------

    async def list_transactions(self, limit: int = 5) -> list[RecentTransaction]:
        resp = await self._client.get("/api/transactions", params={"limit": limit})
        self._raise_for_status(resp)
        return _TRANSACTIONS.validate_python(resp.json())

    async def create_transaction(self, payload: TransactionCreate) -> RecentTransaction:
        resp = await self._client.post("/api/transactions", json=payload.model_dump(mode="json"))
        self._raise_for_status(resp)
        return RecentTransaction.model_validate(resp.json())

    async def list_categories(self) -> list[CategoryRead]:
        resp = await self._client.get("/api/categories")
        self._raise_for_status(resp)
        return _CATEGORIES.validate_python(resp.json())

    async def create_category(self, name: str) -> CategoryRead:
        payload = CategoryCreate(name=name)
        resp = await self._client.post("/api/categories", json=payload.model_dump())
        self._raise_for_status(resp)
        return CategoryRead.model_validate(resp.json())

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    async def health(self) -> dict[str, Any]:
        resp = await self._client.get("/health")
        self._raise_for_status(resp)
        return resp.json()
