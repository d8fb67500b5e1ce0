import collections.abc as _cabc
import contextlib as _ctx
import logging as _log
import typing as _tp

import aiohttp as _ahttp
import zcashrpc.http.types as _zht
import zcashrpc.jsonrpc.errors as _zje

_LOGGER = _log.getLogger(__name__)


class HttpTransport(_zht.Transport):
    """
    Issues one POST per call and returns the raw response body.

    Without an injected session every call runs in a session of its own, so a
    transport is not bound to one event loop and never needs closing. An
    injected session is used as is and stays owned by the caller.

    The HTTP status is not inspected: daemons report application errors with
    non-200 statuses and a JSON-RPC error body, and the body decides the outcome.
    """

    def __init__(
        self,
        url: str,
        authorization: str,
        *,
        timeout: float | None = None,
        session: _ahttp.ClientSession | None = None,
    ) -> None:
        self._url = url
        self._headers = {
            "Authorization": authorization,
            "Content-Type": "application/json",
        }
        self._timeout = (
            _ahttp.ClientTimeout(total=timeout) if timeout is not None else None
        )
        self._session = session

    @property
    def url(self) -> str:
        return self._url

    @property
    def authorization(self) -> str:
        return self._headers["Authorization"]

    @_tp.override
    async def post(self, body: bytes) -> str:
        try:
            async with self._call_session() as session:
                async with session.post(
                    self._url,
                    data=body,
                    headers=self._headers,
                    **self._request_options(),
                ) as response:
                    return await response.text()
        # aiohttp rejects malformed header values and bodies with ValueError.
        except (_ahttp.ClientError, TimeoutError, ValueError) as error:
            raise _zje.TransportError(
                f"POST to {self._url} failed: {error!r}"
            ) from error

    @_tp.override
    async def close(self) -> None:
        pass

    @_ctx.asynccontextmanager
    async def _call_session(self) -> _cabc.AsyncIterator[_ahttp.ClientSession]:
        if self._session is not None:
            yield self._session
            return

        _LOGGER.debug("Opening HTTP session for %s.", self._url)
        async with _ahttp.ClientSession() as session:
            yield session

    def _request_options(self) -> dict[str, _tp.Any]:
        if self._timeout is None:
            return {}

        return {"timeout": self._timeout}
