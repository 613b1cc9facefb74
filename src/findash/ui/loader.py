"""View-state loader for one mount of the dashboard page.

Both fetches are scheduled before either is awaited. Each one writes its own
slice of ``DashboardState`` when it resolves; ``loading`` clears once both
have settled, whatever their outcome. A failed fetch is logged and leaves its
slice at the initial value.

``teardown()`` is the abort signal: in-flight fetches are cancelled and any
result that still arrives is dropped.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Callable

import httpx

from findash.config import settings
from findash.api.schemas.dashboard import ChartSeries
from findash.ui.api_client import APIError, FinanceClient
from findash.ui.view import DashboardState

logger = logging.getLogger(__name__)

Listener = Callable[[DashboardState], None]

# ValueError covers undecodable JSON and pydantic ValidationError.
FETCH_ERRORS = (APIError, httpx.HTTPError, httpx.InvalidURL, ValueError)


class DashboardLoader:
    def __init__(
        self,
        client: FinanceClient,
        *,
        limit: int | None = None,
        listener: Listener | None = None,
    ) -> None:
        self._client = client
        self._limit = limit or settings.RECENT_TRANSACTIONS_LIMIT
        self._listener = listener
        self._state = DashboardState()
        self._run: asyncio.Future | None = None
        self._tasks: list[asyncio.Task] = []
        self._torn_down = False

    async def __aenter__(self) -> "DashboardLoader":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.teardown()

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def active(self) -> bool:
        return not self._torn_down

    async def load(self) -> DashboardState:
        """Fetch once per mount and return the settled state.

        Later calls wait on the same fetches; they never re-enter loading.
        """
        if self._torn_down:
            raise RuntimeError("DashboardLoader has been torn down.")
        if self._run is None:
            self._run = asyncio.ensure_future(self._fetch_all())
        await asyncio.wait({self._run})
        return self._state

    def teardown(self) -> None:
        if self._torn_down:
            return
        self._torn_down = True
        for task in self._tasks:
            task.cancel()
        if self._run is not None and not self._run.done():
            self._run.cancel()
            logger.debug("Dashboard torn down before fetches settled")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _fetch_all(self) -> None:
        self._tasks = [
            asyncio.create_task(self._load_summary()),
            asyncio.create_task(self._load_transactions()),
        ]
        results = await asyncio.gather(*self._tasks, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, asyncio.CancelledError):
                logger.error("Unexpected error loading dashboard", exc_info=result)
        self._apply(loading=False)

    async def _load_summary(self) -> None:
        try:
            summary = await self._client.get_dashboard()
        except FETCH_ERRORS as exc:
            logger.warning("Error fetching dashboard summary: %s", exc)
            return
        self._apply(summary=summary)

    async def _load_transactions(self) -> None:
        try:
            transactions = await self._client.list_transactions(limit=self._limit)
        except FETCH_ERRORS as exc:
            logger.warning("Error fetching recent transactions: %s", exc)
            return
        self._apply(recent_transactions=tuple(transactions[: self._limit]))

    def _apply(self, **changes) -> None:
        if self._torn_down:
            return
        self._state = replace(self._state, **changes)
        if self._listener is not None:
            self._listener(self._state)


async def load_chart(client: FinanceClient, days: int) -> ChartSeries | None:
    """Chart data is fetched on its own; a failure yields ``None``."""
    try:
        return await client.get_chart(days)
    except FETCH_ERRORS as exc:
        logger.warning("Error fetching chart data: %s", exc)
        return None


# ------------------------------------------------------------------
# Synchronous entry points for Streamlit and the CLI
# ------------------------------------------------------------------

def fetch_dashboard(
    base_url: str | None = None,
    *,
    limit: int | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DashboardState:
    async def _run() -> DashboardState:
        try:
            client = FinanceClient(base_url, transport=transport)
        except httpx.InvalidURL as exc:
            logger.warning("Invalid API URL %r: %s", base_url, exc)
            return DashboardState(loading=False)
        async with client:
            async with DashboardLoader(client, limit=limit) as loader:
                return await loader.load()

    return asyncio.run(_run())


def fetch_chart(
    base_url: str | None = None,
    days: int = 90,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ChartSeries | None:
    async def _run() -> ChartSeries | None:
        try:
            client = FinanceClient(base_url, transport=transport)
        except httpx.InvalidURL as exc:
            logger.warning("Invalid API URL %r: %s", base_url, exc)
            return None
        async with client:
            return await load_chart(client, days)

    return asyncio.run(_run())
