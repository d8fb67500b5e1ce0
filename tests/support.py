import asyncio as _asyncio
import collections.abc as _cabc
import contextlib as _ctx
import json as _json
import threading as _th
import typing as _tp

import aiohttp.test_utils as _ahttpt
import aiohttp.web as _ahttpw
import jsonrpcserver as _jrpcs

GETINFO_RESULT = {
    "balance": 1.25,
    "blocks": 12345,
    "connections": 8,
    "difficulty": 52.5,
    "errors": "",
    "keypoololdest": 1600000000,
    "keypoolsize": 101,
    "paytxfee": 0.0,
    "protocolversion": 170013,
    "proxy": "",
    "relayfee": 0.000001,
    "testnet": True,
    "timeoffset": 0,
    "version": 4050050,
    "walletversion": 60000,
}

Responder = _cabc.Callable[[dict[str, _tp.Any]], str]


class FakeTransport:
    """In-memory transport recording every request it is handed."""

    def __init__(self, responder: Responder) -> None:
        self._responder = responder
        self.requests = list[dict[str, _tp.Any]]()
        self.closed = False

    async def post(self, body: bytes) -> str:
        request = _json.loads(body)
        self.requests.append(request)
        return self._responder(request)

    async def close(self) -> None:
        self.closed = True


def echo_result(result: _tp.Any) -> Responder:
    def respond(request: dict[str, _tp.Any]) -> str:
        return _json.dumps({"result": result, "error": None, "id": request["id"]})

    return respond


async def getinfo() -> _jrpcs.Result:
    return _jrpcs.Success(GETINFO_RESULT)


async def getblockcount() -> _jrpcs.Result:
    return _jrpcs.Success(12345)


async def getblockhash(height: int) -> _jrpcs.Result:
    if height > 12345:
        return _jrpcs.Error(-8, "Block height out of range")
    return _jrpcs.Success(f"{height:064x}")


DAEMON_METHODS = {
    "getinfo": getinfo,
    "getblockcount": getblockcount,
    "getblockhash": getblockhash,
}


def create_daemon_app(
    methods: _cabc.Mapping[str, _cabc.Callable[..., _tp.Any]],
) -> _ahttpw.Application:
    async def handle(request: _ahttpw.Request) -> _ahttpw.Response:
        request.app["authorizations"].append(request.headers.get("Authorization"))
        text = await request.text()
        # zcashd speaks JSON-RPC 1.0, which the default 2.0 schema check rejects.
        response = await _jrpcs.async_dispatch(
            text, methods=dict(methods), validator=lambda deserialized: deserialized
        )
        return _ahttpw.Response(text=response, content_type="application/json")

    app = _ahttpw.Application()
    app["authorizations"] = []
    app.router.add_post("/", handle)
    return app


def hostport(server: _ahttpt.TestServer) -> str:
    return f"{server.host}:{server.port}"


@_ctx.contextmanager
def threaded_daemon(
    methods: _cabc.Mapping[str, _cabc.Callable[..., _tp.Any]],
) -> _cabc.Iterator[str]:
    """Serves a fake daemon from a loop of its own; yields its host:port."""
    loop = _asyncio.new_event_loop()
    thread = _th.Thread(target=loop.run_forever, daemon=True)
    thread.start()

    async def start() -> _ahttpt.TestServer:
        server = _ahttpt.TestServer(create_daemon_app(methods))
        await server.start_server()
        return server

    server = _asyncio.run_coroutine_threadsafe(start(), loop).result()
    try:
        yield hostport(server)
    finally:
        _asyncio.run_coroutine_threadsafe(server.close(), loop).result()
        loop.call_soon_threadsafe(loop.stop)
        thread.join()
        loop.close()
