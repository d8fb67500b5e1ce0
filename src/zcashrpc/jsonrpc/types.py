import collections.abc as _cabc

type JsonScalar = bool | int | float | str | None
type JsonObject = _cabc.Mapping[str, "Json"]
type JsonStructured = _cabc.Sequence["Json"] | JsonObject
type Json = JsonScalar | JsonStructured

type Params = _cabc.Sequence[Json]
