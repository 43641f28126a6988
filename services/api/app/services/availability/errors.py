from __future__ import annotations


class QueryCancelled(Exception):
    """The caller abandoned the query before it finished."""


class QueryValidationError(Exception):
    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {', '.join(v)}" for k, v in errors.items()))
