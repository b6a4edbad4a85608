"""Request-scoped context (contextvars).

Holds the current request id so log records and analytics can be
correlated with the HTTP request that produced them. Set by
RequestIDMiddleware; reads outside a request return None.
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def set_request_id(request_id: str | None) -> Token:
    """Bind request_id to the current task. Returns the token for reset."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Return the id of the request being served, or None."""
    return _current_request_id.get()
