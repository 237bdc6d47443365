"""
Resolution of the HelloDao dependency.

`get_hello_dao()` is the single decision point used by the factory-style
service: it returns the current override when one is set, otherwise a fresh
`StaticHelloDao`.  Nothing is cached, so consecutive services in one test can
be bound to a double, then the real DAO, then a double again.

Swapping the DAO for tests only requires overriding this one dependency; no
service code changes are needed:

    with override_hello_dao(FakeDao()):
        service = build_hello_service()

The override slot is a ``ContextVar`` rather than a module global.  An
override is only visible to the execution context that set it (and to
contexts copied from it), so tests running in separate threads or tasks do
not see each other's doubles.  A worker thread started inside
`override_hello_dao()` does not inherit the override and resolves
`StaticHelloDao`; call `override_hello_dao()` inside the thread if it needs one.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

from hello_di.dao.base import HelloDao, require_hello_dao
from hello_di.dao.static import StaticHelloDao

logger = logging.getLogger(__name__)

_override: ContextVar[Optional[HelloDao]] = ContextVar("hello_dao_override", default=None)


def get_hello_dao() -> HelloDao:
    """Return the overriding HelloDao if one is set, else a new StaticHelloDao."""
    override = _override.get()
    if override is not None:
        logger.debug("Resolved HelloDao override %r.", override)
        return override

    dao = StaticHelloDao()
    logger.debug("Resolved default HelloDao %r.", dao)
    return dao


def current_hello_dao_override() -> Optional[HelloDao]:
    """Return the override bound in the current context, or ``None``."""
    return _override.get()


def set_hello_dao_override(dao: HelloDao) -> Token:
    """
    Bind *dao* as the override for subsequent `get_hello_dao()` calls.

    Returns the token to hand back to `clear_hello_dao_override()`.  Callers
    are responsible for clearing it; prefer `override_hello_dao()` which does
    so automatically.
    """
    token = _override.set(require_hello_dao(dao))
    logger.debug("HelloDao override set to %r.", dao)
    return token


def clear_hello_dao_override(token: Optional[Token] = None) -> None:
    """
    Remove the current override.

    With a *token* from `set_hello_dao_override()` the previous binding is
    restored (which matters for nested overrides); without one the slot is
    emptied.
    """
    if token is not None:
        _override.reset(token)
    else:
        _override.set(None)
    logger.debug("HelloDao override cleared.")


@contextmanager
def override_hello_dao(dao: HelloDao) -> Iterator[HelloDao]:
    """Override the HelloDao for the duration of a ``with`` block."""
    token = set_hello_dao_override(dao)
    try:
        yield dao
    finally:
        clear_hello_dao_override(token)
