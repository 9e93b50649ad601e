"""Static JSON data-file client.

Layout under the data base URL:
    config.json        {"months": ["1", "2", ...]}
    month<ID>.json     {"submissions": [{"teamName": "...", "score": 10}, ...]}
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

import httpx
from pydantic import ValidationError

from ...config import get_settings
from ..errors import LoadError, ParseError
from ..models import Config, MonthData, MonthId

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"


def month_file(month_id: MonthId) -> str:
    return f"month{month_id}.json"


def _base_url(base_url: Optional[str]) -> str:
    return (base_url or get_settings().data_url).rstrip("/")


@asynccontextmanager
async def _session(client: Optional[httpx.AsyncClient]) -> AsyncIterator[httpx.AsyncClient]:
    """Use the caller's client if given, otherwise open a short-lived one."""
    if client is not None:
        yield client
        return
    settings = get_settings()
    timeout = httpx.Timeout(settings.http_timeout, connect=settings.connect_timeout)
    async with httpx.AsyncClient(timeout=timeout) as owned:
        yield owned


async def fetch_json(url: str, client: Optional[httpx.AsyncClient] = None) -> Any:
    """GET a JSON resource.

    Raises:
        LoadError: the request failed or the response status was not 2xx.
        ParseError: the body is not valid JSON.
    """
    async with _session(client) as session:
        try:
            response = await session.get(url)
        except httpx.HTTPError as exc:
            raise LoadError(f"Request for {url} failed: {type(exc).__name__}: {exc}", url=url) from exc

    if not response.is_success:
        raise LoadError(
            f"Failed to load {url.rsplit('/', 1)[-1]} (HTTP {response.status_code})",
            url=url,
            status_code=response.status_code,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise ParseError(f"{url} is not valid JSON: {exc}", url=url) from exc


async def load_config(
    base_url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Config:
    """Load the main configuration file with the list of months."""
    url = f"{_base_url(base_url)}/{CONFIG_FILE}"
    try:
        payload = await fetch_json(url, client)
        try:
            return Config.model_validate(payload)
        except ValidationError as exc:
            raise ParseError(f"{url} does not match the config schema: {exc}", url=url) from exc
    except (LoadError, ParseError) as exc:
        logger.error("Error loading config: %s", exc)
        raise


async def load_month(
    month_id: MonthId,
    base_url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> MonthData:
    """Load the data file for one month."""
    url = f"{_base_url(base_url)}/{month_file(month_id)}"
    try:
        payload = await fetch_json(url, client)
        try:
            return MonthData.model_validate(payload)
        except ValidationError as exc:
            raise ParseError(f"{url} does not match the month schema: {exc}", url=url) from exc
    except (LoadError, ParseError) as exc:
        logger.error("Error loading month %s: %s", month_id, exc)
        raise
