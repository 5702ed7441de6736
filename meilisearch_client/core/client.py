import logging
from time import perf_counter
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from meilisearch_client.core.config import CONNECT_TIMEOUT_SEC, READ_TIMEOUT_SEC, load_settings
from meilisearch_client.core.exceptions import (
    ConnectionFailedError,
    HTTPStatusError,
    MalformedResponseError,
)
from meilisearch_client.core.index import Index
from meilisearch_client.models.error import APIError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Meili-API-Key"


def _parse_api_error(resp: httpx.Response) -> Optional[APIError]:
    try:
        body = resp.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    try:
        return APIError.model_validate(body)
    except ValidationError:
        return None


class Client:
    """
    Connection details for one search service instance.

    Every call opens its own httpx.AsyncClient. Requests are never retried,
    failures are raised as TransportError subclasses.
    """

    def __init__(
        self,
        host: str,
        api_key: Optional[str] = None,
        connect_timeout: float = CONNECT_TIMEOUT_SEC,
        read_timeout: float = READ_TIMEOUT_SEC,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.host = host.rstrip("/")
        self.api_key = api_key
        self.timeout = httpx.Timeout(read_timeout, connect=connect_timeout)
        self.transport = transport

    @classmethod
    def from_env(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "Client":
        settings = load_settings()
        return cls(
            settings.host,
            api_key=settings.api_key,
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            transport=transport,
        )

    def index(self, uid: str) -> Index:
        return Index(self, uid)

    def _headers(self) -> Dict[str, str]:
        if self.api_key:
            return {API_KEY_HEADER: self.api_key}
        return {}

    async def get(self, path: str, expected_status: int = 200) -> Any:
        """
        GET `path` (relative to the host) and return the decoded JSON body.
        """
        url = f"{self.host}{path}"
        logger.debug("GET %s", url)

        t0 = perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(url, headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning("GET %s failed: %s", url, type(e).__name__)
            raise ConnectionFailedError(details={"url": url, "error": type(e).__name__}) from e

        took_ms = round((perf_counter() - t0) * 1000, 2)
        logger.debug("GET %s -> %s in %sms", url, resp.status_code, took_ms)

        if resp.status_code != expected_status:
            api_error = _parse_api_error(resp)
            message = api_error.message if api_error and api_error.message else None
            logger.warning("GET %s returned status=%s", url, resp.status_code)
            raise HTTPStatusError(
                resp.status_code,
                message=message,
                details={"url": url, "status_code": resp.status_code, "body": resp.text},
                api_error=api_error,
            )

        try:
            return resp.json()
        except ValueError as e:
            logger.warning("GET %s returned a non JSON body", url)
            raise MalformedResponseError(details={"url": url, "body": resp.text}) from e
