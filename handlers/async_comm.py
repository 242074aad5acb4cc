"""Asynchronous HTTP utilities.

`AsyncHttp` wraps an aiohttp session with content-type based response decoding and maps
transport failures onto the `AsyncCommError` family.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final, Literal, Self

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aiohttp.client import ClientResponse


__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommInvalidContentTypeError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["POST"]

CONNECT_TIMEOUT: Final[float] = 1.0


class AsyncHttp:
    """Asynchronous HTTP client.

    The aiohttp session is created on first use so instances can be built outside a
    running event loop. Responses are decoded by the handler registered for their
    content type.
    """

    def __init__(self) -> None:
        """Register the default content handlers.

        The default handlers include:
            - "text/plain": Decodes bytes to a UTF-8 string.
            - "application/json": Parses bytes as JSON.
        """
        self.__session: ClientSession | None = None
        self.content_handlers: dict[str, Callable[[bytes], Any]] = {}

        self.add_handler("text/plain", lambda x: x.decode("utf-8"))
        self.add_handler("application/json", lambda x: json.loads(x.decode("utf-8")))

    async def __aenter__(self) -> Self:
        self.initialize_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    def initialize_session(self) -> None:
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession(raise_for_status=True)
            logger.debug("%s session initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        """Get the current aiohttp session, creating it when missing or closed."""
        self.initialize_session()
        if self.__session is None:
            msg = "Session could not be initialized"
            raise RuntimeError(msg)
        return self.__session

    @property
    def is_open(self) -> bool:
        return self.__session is not None and not self.__session.closed

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.is_open:
            await self.__session.close()
            logger.info("%s session closed", self.__class__.__name__)
        self.__session = None

    async def post(
        self,
        *,
        url: str,
        data: Any | None = None,
        params: dict[str, str] | None = None,
        total_timeout: float = 10.0,
    ) -> Any:
        """Send ``data`` as a JSON body with POST.

        Args:
            url (str): Request URL.
            data (Any | None): JSON-serializable request body.
            params (dict[str, str] | None): Optional query parameters.
            total_timeout (float): Total timeout in seconds; zero or less disables it.

        Returns:
            Any: The decoded response body, or None for an empty body.

        Raises:
            AsyncCommTimeoutError: If the request times out.
            AsyncCommError: On connection failures and non-2xx responses.
            AsyncCommInvalidContentTypeError: If no handler exists for the response content type.
        """
        return await self._request("POST", url=url, params=params, json=data, total_timeout=total_timeout)

    async def decode_response(self, resp: ClientResponse) -> Any:
        """Decode a response body with the handler for its content type.

        Raises:
            AsyncCommInvalidContentTypeError: If no handler is registered for the content type.
            AsyncCommError: If the handler cannot decode the body.
        """
        content_type: str = resp.headers.get("Content-Type", "").split(";")[0].strip()
        raw: bytes = await resp.read()
        if not raw:
            logger.debug("Received empty response")
            return None

        handler: Callable[[bytes], Any] | None = self.content_handlers.get(content_type)
        msg: str
        if handler is None:
            msg = f"Unknown Content-Type '{content_type}'"
            raise AsyncCommInvalidContentTypeError(msg)

        try:
            return handler(raw)
        except ValueError as err:
            # JSONDecodeError and UnicodeDecodeError are both ValueError subclasses
            logger.debug(err)
            msg = f"Malformed '{content_type}' response body"
            raise AsyncCommError(msg) from err

    def add_handler(self, content_type: str, handler: Callable[[bytes], Any]) -> None:
        """Register ``handler`` for responses of ``content_type``, replacing any existing one."""
        if content_type in self.content_handlers:
            logger.warning("Handler for content type '%s' already exists, replacing it", content_type)
        self.content_handlers[content_type] = handler

    @staticmethod
    def _build_timeout(total_timeout: float) -> aiohttp.ClientTimeout:
        if total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if total_timeout < CONNECT_TIMEOUT:
            return aiohttp.ClientTimeout(total=total_timeout)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total_timeout)

    async def _request(self, method: HTTPMethod, *, url: str, total_timeout: float, **kwargs: Any) -> Any:
        logger.debug("[%s] url=%s timeout=%s", method, url, total_timeout)
        try:
            async with self.session.request(
                method=method,
                url=url,
                timeout=self._build_timeout(total_timeout),
                **kwargs,
            ) as resp:
                resp.raise_for_status()
                return await self.decode_response(resp)

        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug(err)
            msg = "Error response from the server."
            raise AsyncCommError(msg, status=err.status) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug(err)
            msg = "The server is not running, or the port is closed."
            raise AsyncCommError(msg) from err
        except (aiohttp.ClientError, ConnectionResetError) as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """Base class for asynchronous communication errors.

    Attributes:
        msg (str): Error message, with the HTTP status appended when known.
        status (int | None): HTTP status of an error response.
    """

    def __init__(self, msg: str | BaseException, *, status: int | None = None) -> None:
        self.msg: str = str(msg)
        self.status: int | None = status
        if status is not None:
            self.msg = f"{self.msg}: status='{status}'"
        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """A request did not complete within its timeout."""


class AsyncCommInvalidContentTypeError(AsyncCommError):
    """A response arrived with a content type that has no registered handler."""
