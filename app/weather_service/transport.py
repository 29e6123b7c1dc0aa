"""Thin async HTTP GET transport shared by the weather clients."""

from typing import Any, Optional

import httpx

from app.logging_config import logger
from app.metrics import observe_upstream


class HttpTransport:
    """Issue GET requests and return the decoded JSON body.

    Errors are never caught here: ``httpx.HTTPStatusError`` for non-2xx
    responses, ``httpx.RequestError`` for network failures and timeouts,
    and ``ValueError`` for an undecodable body all reach the caller as-is.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs = {"transport": self.transport}
        if self.base_url:
            kwargs["base_url"] = self.base_url
        return httpx.AsyncClient(**kwargs)

    async def get(self, url: str, params: Optional[dict] = None) -> Any:
        """Perform a GET request.

        Args:
            url: Path relative to ``base_url``, or a fully-qualified URL.
            params: Query parameters, URL-encoded by httpx.

        Returns:
            The decoded JSON response body.
        """
        async with self._client() as client:
            host = httpx.URL(url).host or client.base_url.host
            try:
                response = await client.get(url, params=params)
            except httpx.RequestError as exc:
                observe_upstream(host, "error")
                logger.error("HTTP_GET_REQUEST_FAILED", url=url, error=str(exc))
                raise
            observe_upstream(host, response.status_code)
            logger.info(
                "HTTP_GET_RESPONSE",
                url=str(response.request.url.copy_remove_param("appid")),
                status=response.status_code,
            )
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError:
                logger.error("HTTP_GET_BAD_STATUS", url=url, status=response.status_code)
                raise
            return response.json()
