"""Request-scoped context handed to every frontend controller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Cross-cutting request state.

    ``user_id`` is the id of the authenticated customer (the actor), or
    ``None`` for anonymous requests. Authentication happens before the
    context is built.
    """

    user_id: str | None = None
    locale: str = "en"
