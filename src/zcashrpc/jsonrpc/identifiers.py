import itertools as _it
import threading as _th

MAX_ID = 2**64 - 1


class IdentifierGenerator:
    """
    Hands out request ids 0, 1, 2, ... for the lifetime of one client.

    Ids are never reused, also when the call that consumed one fails.
    """

    def __init__(self) -> None:
        self._ids = _it.count()
        self._lock = _th.Lock()

    def __iter__(self) -> "IdentifierGenerator":
        return self

    def __next__(self) -> int:
        with self._lock:
            request_id = next(self._ids)

        if request_id > MAX_ID:
            raise RuntimeError("Request ids exhausted.")

        return request_id
