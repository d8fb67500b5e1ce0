import collections.abc as _cabc

import aiohttp.test_utils as _ahttpt
import pytest
import pytest_asyncio

import support as _support


@pytest_asyncio.fixture
async def daemon() -> _cabc.AsyncIterator[_ahttpt.TestServer]:
    app = _support.create_daemon_app(_support.DAEMON_METHODS)
    async with _ahttpt.TestServer(app) as server:
        yield server


@pytest.fixture
def fake_transport() -> _support.FakeTransport:
    return _support.FakeTransport(_support.echo_result(1))
