"""Pre-flight checks for the Streamlit UI.

No ORM, no DB: uses the API client for backend checks.
"""
import asyncio
from typing import List, Optional

import httpx


def validate_backend_connection(
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[str]:
    """Validate that the FastAPI backend is reachable."""
    from findash.ui.api_client import APIError, FinanceClient

    async def _check() -> None:
        async with FinanceClient(base_url, timeout=5.0, transport=transport) as client:
            await client.health()

    errors = []
    try:
        asyncio.run(_check())
    except (APIError, httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        errors.append(f"Backend connection failed: {e}")
    return errors


def run_all_checks(base_url: Optional[str] = None) -> List[str]:
    """Run all validation checks."""
    errors = []
    errors.extend(validate_backend_connection(base_url))
    return errors
