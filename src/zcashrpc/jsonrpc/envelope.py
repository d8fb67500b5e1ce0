import decimal as _decimal
import json as _json
import typing as _tp

import jsonrpcclient as _jrpcc
import pydantic as _pyd
import zcashrpc.jsonrpc.errors as _zje
import zcashrpc.jsonrpc.types as _tps

type Response = _jrpcc.Ok | _jrpcc.Error

type ResponseId = _pyd.StrictInt | _pyd.StrictStr


class RequestEnvelope(_pyd.BaseModel):
    model_config = _pyd.ConfigDict(frozen=True)

    jsonrpc: _tp.Literal["1.0"] = "1.0"
    id: _pyd.NonNegativeInt
    method: str
    params: list[_tp.Any]


class ErrorObject(_pyd.BaseModel):
    model_config = _pyd.ConfigDict(frozen=True)

    code: _pyd.StrictInt
    message: _pyd.StrictStr
    data: _tp.Any = None


class ResponseEnvelope(_pyd.BaseModel):
    """
    `id` must be present but may be null. A null `result` or `error` counts as
    not populated, which is how 1.0-style daemons fill the unused field.
    """

    model_config = _pyd.ConfigDict(frozen=True)

    id: ResponseId | None
    result: _tp.Any = None
    error: ErrorObject | None = None


def wrap(request_id: int, method: str, params: _tps.Params) -> bytes:
    envelope = RequestEnvelope(id=request_id, method=method, params=list(params))
    return envelope.model_dump_json().encode()


def parse(text: str | bytes) -> ResponseEnvelope:
    try:
        data = _json.loads(text, parse_float=_decimal.Decimal)
    except ValueError as error:
        raise _zje.MalformedResponseError("Response is not valid JSON.") from error

    try:
        return ResponseEnvelope.model_validate(data)
    except _pyd.ValidationError as error:
        raise _zje.MalformedResponseError(
            "Response is not a JSON-RPC response envelope."
        ) from error


def classify(envelope: ResponseEnvelope, expected_id: int) -> Response:
    # The id is checked first: a foreign response says nothing about this request.
    if envelope.id is not None and envelope.id != expected_id:
        raise _zje.MismatchedIdError(expected_id, envelope.id)

    if envelope.error is not None:
        error = envelope.error
        return _jrpcc.Error(error.code, error.message, error.data, envelope.id)

    if envelope.result is not None:
        return _jrpcc.Ok(envelope.result, envelope.id)

    raise _zje.MalformedResponseError("Response has neither a result nor an error.")


def unwrap[T](
    envelope: ResponseEnvelope, expected_id: int, response_type: _pyd.TypeAdapter[T]
) -> T:
    response = classify(envelope, expected_id)

    match response:
        case _jrpcc.Ok(result):
            try:
                return response_type.validate_python(result)
            except _pyd.ValidationError as error:
                raise _zje.DecodeError(error) from error
        case _jrpcc.Error() as error:
            raise _zje.RpcError(error.code, error.message, error.data)
        case _:
            _tp.assert_never(response)
