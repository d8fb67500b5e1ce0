import typing as _tp


class Transport(_tp.Protocol):
    async def post(self, body: bytes) -> str: ...
    async def close(self) -> None: ...
