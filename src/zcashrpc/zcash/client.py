import os as _os
import typing as _tp

import aiohttp as _ahttp
import zcashrpc.http.transport as _zhtr
import zcashrpc.jsonrpc.client as _zjc
import zcashrpc.jsonrpc.errors as _zje
import zcashrpc.jsonrpc.methods as _zjm
import zcashrpc.zcash.responses as _zzr

HOST_VARIABLE = "ZCASHRPC_HOST"
AUTH_VARIABLE = "ZCASHRPC_AUTH"


class Client(_zjc.ClientBase[_zhtr.HttpTransport]):
    """
    Typed client of a zcashd RPC server.

    Each RPC method is a coroutine named after the daemon's method, taking its
    positional parameters and returning its parsed response. Failures raise a
    `zcashrpc.jsonrpc.errors.ClientError`.
    """

    def __init__(
        self,
        hostport: str,
        authcookie: str,
        *,
        timeout: float | None = None,
        session: _ahttp.ClientSession | None = None,
    ) -> None:
        """
        `hostport` is a host or IP with an optional `:PORT`. `authcookie` is
        the already base64-encoded credential, e.g. the contents of
        `~/.zcash/.cookie`, and is sent verbatim.
        """
        transport = _zhtr.HttpTransport(
            f"http://{hostport}/",
            f"Basic {authcookie}",
            timeout=timeout,
            session=session,
        )
        super().__init__(transport)

    @classmethod
    def from_env(
        cls,
        *,
        timeout: float | None = None,
        session: _ahttp.ClientSession | None = None,
    ) -> _tp.Self:
        hostport = _read_variable(HOST_VARIABLE)
        authcookie = _read_variable(AUTH_VARIABLE)
        return cls(hostport, authcookie, timeout=timeout, session=session)

    @property
    def url(self) -> str:
        return self._transport.url

    @property
    def authorization(self) -> str:
        return self._transport.authorization

    @_zjm.rpc_method(_zzr.GetInfoResponse)
    async def getinfo(self) -> _zzr.GetInfoResponse:
        raise NotImplementedError()

    @_zjm.rpc_method(_zzr.GetBlockChainInfoResponse)
    async def getblockchaininfo(self) -> _zzr.GetBlockChainInfoResponse:
        raise NotImplementedError()

    @_zjm.rpc_method(int)
    async def getblockcount(self) -> int:
        raise NotImplementedError()

    @_zjm.rpc_method(str)
    async def getbestblockhash(self) -> str:
        raise NotImplementedError()

    @_zjm.rpc_method(str)
    async def getblockhash(self, height: int) -> str:
        raise NotImplementedError()

    @_zjm.rpc_method(float)
    async def getdifficulty(self) -> float:
        raise NotImplementedError()

    @_zjm.rpc_method(int)
    async def getconnectioncount(self) -> int:
        raise NotImplementedError()


def _read_variable(name: str) -> str:
    try:
        return _os.environ[name]
    except KeyError:
        raise _zje.EnvironmentVariableError(name) from None
