import collections.abc as _cabc
import dataclasses as _dc
import functools as _ft
import inspect as _insp
import typing as _tp

import pydantic as _pyd
import zcashrpc.jsonrpc.client as _zjc
import zcashrpc.jsonrpc.types as _tps

type RpcMethod[C: _zjc.ClientBase, **P, R] = _cabc.Callable[
    _tp.Concatenate[C, P], _cabc.Awaitable[R]
]


@_dc.dataclass(frozen=True)
class Parameter:
    name: str
    annotation: _tp.Any
    adapter: _pyd.TypeAdapter[_tp.Any] = _dc.field(repr=False, compare=False)
    default: _tp.Any = _insp.Parameter.empty


@_dc.dataclass(frozen=True)
class MethodDeclaration[R]:
    """
    Wire name, positional parameters and response schema of one RPC method.
    """

    name: str
    parameters: tuple[Parameter, ...]
    response_type: _tp.Any
    response_adapter: _pyd.TypeAdapter[R] = _dc.field(repr=False, compare=False)

    @classmethod
    def from_function(
        cls,
        function: _cabc.Callable[..., _tp.Any],
        response_type: _tp.Any,
        name: str | None = None,
    ) -> "MethodDeclaration[R]":
        signature = _insp.signature(function)
        type_hints = _tp.get_type_hints(function)

        # The first parameter is the client itself.
        _, *declared = signature.parameters.values()

        parameters = []
        for parameter in declared:
            if parameter.kind not in (
                _insp.Parameter.POSITIONAL_ONLY,
                _insp.Parameter.POSITIONAL_OR_KEYWORD,
            ):
                raise TypeError(
                    f"Parameter {parameter.name!r} of {function.__qualname__} "
                    "must be positional."
                )

            annotation = type_hints.get(parameter.name, _tp.Any)
            parameters.append(
                Parameter(
                    parameter.name,
                    annotation,
                    _pyd.TypeAdapter(annotation),
                    default=parameter.default,
                )
            )

        return cls(
            name=name or function.__name__,
            parameters=tuple(parameters),
            response_type=response_type,
            response_adapter=_pyd.TypeAdapter(response_type),
        )

    def serialize_params(self, *args: _tp.Any, **kwargs: _tp.Any) -> list[_tps.Json]:
        bound = self._signature.bind(*args, **kwargs)
        bound.apply_defaults()

        return [
            parameter.adapter.dump_python(bound.arguments[parameter.name], mode="json")
            for parameter in self.parameters
        ]

    def decode(self, result: _tps.Json) -> R:
        return self.response_adapter.validate_python(result)

    @_ft.cached_property
    def _signature(self) -> _insp.Signature:
        return _insp.Signature(
            [
                _insp.Parameter(
                    p.name,
                    _insp.Parameter.POSITIONAL_OR_KEYWORD,
                    default=p.default,
                    annotation=p.annotation,
                )
                for p in self.parameters
            ]
        )


def rpc_method[C: _zjc.ClientBase, **P, R](
    response_type: type[R] | _tp.Any, name: str | None = None
) -> _cabc.Callable[[RpcMethod[C, P, R]], RpcMethod[C, P, R]]:
    """
    Turns a stub coroutine method into a typed RPC call.

    The stub's signature declares the positional parameters, and its body is
    never run. `name` defaults to the stub's name.
    """

    def create_calling_method(declared_method: RpcMethod[C, P, R]) -> RpcMethod[C, P, R]:
        declaration = MethodDeclaration.from_function(
            declared_method, response_type, name
        )

        @_ft.wraps(declared_method)
        async def calling_method(client: C, *args: P.args, **kwargs: P.kwargs) -> R:
            params = declaration.serialize_params(*args, **kwargs)
            return await client.call(
                declaration.name, params, declaration.response_adapter
            )

        calling_method.declaration = declaration  # type: ignore[attr-defined]

        return calling_method

    return create_calling_method


def declaration_of(method: _cabc.Callable[..., _tp.Any]) -> MethodDeclaration[_tp.Any]:
    try:
        return method.declaration  # type: ignore[attr-defined]
    except AttributeError:
        raise TypeError(f"{method!r} is not an RPC method.") from None

