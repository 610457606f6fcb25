"""Session context lookup for requesters."""

from typing import Any, Callable, Optional

from localizer.resources.models import SessionContext, coerce_locale, iter_ancestry

SessionResolver = Callable[[Any], Optional[SessionContext]]


def session_from_requester(requester: Any) -> Optional[SessionContext]:
    """Find the session context of a requester.

    Walks the requester and its parents for a ``session`` attribute and
    reads its ``locale`` and ``style``. Locale strings are parsed.
    """
    for node in iter_ancestry(requester):
        session = getattr(node, "session", None)
        if session is None:
            continue
        if isinstance(session, SessionContext):
            return session
        return SessionContext(
            locale=coerce_locale(getattr(session, "locale", None)),
            style=getattr(session, "style", None),
        )
    return None
