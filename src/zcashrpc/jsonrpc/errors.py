import typing as _tp

import pydantic as _pyd


class ClientError(Exception):
    """Base class of every error raised by a JSON-RPC call."""


class EnvironmentVariableError(ClientError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Environment variable {name} is not set.")
        self.name = name


class TransportError(ClientError):
    """The HTTP round trip failed before a response body was read."""


class MalformedResponseError(ClientError):
    """The response body is not a well-formed JSON-RPC response envelope."""


class MismatchedIdError(ClientError):
    def __init__(self, expected_id: int, actual_id: int | str) -> None:
        super().__init__(
            f"Response id {actual_id!r} does not match request id {expected_id!r}."
        )
        self.expected_id = expected_id
        self.actual_id = actual_id


class RpcError(ClientError):
    """The server reported an application-level error."""

    def __init__(self, code: int, message: str, data: _tp.Any = None) -> None:
        super().__init__(f"RPC error {code}: {message}")
        self.code = code
        self.message = message
        self.data = data


class DecodeError(ClientError):
    """The result did not match the response schema of the invoked method."""

    def __init__(self, validation_error: _pyd.ValidationError) -> None:
        super().__init__(str(validation_error))
        self.schema_title = validation_error.title
        self.errors = validation_error.errors()
