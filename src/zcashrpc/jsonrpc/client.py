import logging as _log
import types as _types
import typing as _tp

import pydantic as _pyd
import zcashrpc.http.types as _zht
import zcashrpc.jsonrpc.envelope as _zjenv
import zcashrpc.jsonrpc.identifiers as _zjid
import zcashrpc.jsonrpc.types as _tps

_LOGGER = _log.getLogger(__name__)


class ClientBase[T: _zht.Transport]:
    """
    Generic call path shared by all typed RPC methods.

    Subclasses declare their methods with `zcashrpc.jsonrpc.methods.rpc_method`.
    """

    def __init__(self, transport: T) -> None:
        self._transport = transport
        self._identifiers = _zjid.IdentifierGenerator()

    async def call[R](
        self, method: str, params: _tps.Params, response_type: _pyd.TypeAdapter[R]
    ) -> R:
        request_id = next(self._identifiers)

        data = _zjenv.wrap(request_id, method, params)

        _LOGGER.debug("Sending request %s.", data)
        text = await self._transport.post(data)
        _LOGGER.debug("Got response %s.", text)

        envelope = _zjenv.parse(text)

        return _zjenv.unwrap(envelope, request_id, response_type)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> _tp.Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: _types.TracebackType | None,
    ) -> None:
        await self.close()
