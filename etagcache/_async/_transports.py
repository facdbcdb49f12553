from __future__ import annotations

import logging
import types
import typing as tp

import httpx

from .._config import Config, get_default_config
from .._exceptions import TransportError

if tp.TYPE_CHECKING:  # pragma: no cover
    from typing_extensions import Self

logger = logging.getLogger("etagcache.transports")

__all__ = ("AsyncBaseTransport", "AsyncHTTPTransport")


class AsyncBaseTransport:
    async def get(self, url: str, etag: str = "") -> httpx.Response:
        raise NotImplementedError()

    async def aclose(self) -> None:
        return

    async def __aenter__(self) -> "Self":
        return self

    async def __aexit__(
        self,
        exc_type: tp.Optional[tp.Type[BaseException]] = None,
        exc_value: tp.Optional[BaseException] = None,
        traceback: tp.Optional[types.TracebackType] = None,
    ) -> None:
        await self.aclose()


class AsyncHTTPTransport(AsyncBaseTransport):
    """
    Sends conditional GET requests with HTTPX.

    :param client: The client used to send requests. When omitted, one is built from `config`
        and closed together with the transport, defaults to None
    :type client: tp.Optional[httpx.AsyncClient], optional
    :param config: Overrides for the default configuration, defaults to None
    :type config: tp.Optional[Config], optional
    """

    def __init__(
        self,
        client: tp.Optional[httpx.AsyncClient] = None,
        config: tp.Optional[Config] = None,
    ) -> None:
        self._config = get_default_config()
        self._config.update(config or {})
        self._owns_client = client is None
        self._client = (
            client
            if client is not None
            else httpx.AsyncClient(
                headers={"User-Agent": self._config["user_agent"], "Accept": "application/json"},
                timeout=self._config["timeout"],
                follow_redirects=True,
            )
        )

    async def get(self, url: str, etag: str = "") -> httpx.Response:
        """
        Sends a GET request, conditional on `etag` when one is given.

        :param url: The resource url
        :type url: str
        :param etag: The validator of the cached representation, defaults to ""
        :type etag: str, optional
        :raises TransportError: If no response could be obtained
        :return: The response, with its body already read
        :rtype: httpx.Response
        """

        headers = {"If-None-Match": etag} if etag else {}
        if etag:
            logger.debug(f"Sending conditional request to {url}")
        else:
            logger.debug(f"Sending unconditional request to {url}")

        try:
            return await self._client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"GET {url} failed: {exc}") from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
