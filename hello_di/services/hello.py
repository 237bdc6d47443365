"""
Greeting service layer.

`HelloService` receives its `HelloDao` through the constructor and has no
knowledge of which implementation it was given.  Two ways to obtain one:

* explicit injection, where the composition root builds the DAO itself:
      HelloService(StaticHelloDao())
* self-resolving, where the DAO comes from `get_hello_dao()` (and therefore
  honours any test override):
      build_hello_service()
"""

import logging

from hello_di.dao.base import HelloDao, require_hello_dao
from hello_di.dependencies.dao import get_hello_dao

logger = logging.getLogger(__name__)


class HelloService:
    """Business service that greets by delegating to a HelloDao."""

    def __init__(self, dao: HelloDao) -> None:
        self._dao = require_hello_dao(dao)

    @property
    def dao(self) -> HelloDao:
        """The DAO bound at construction.  Read-only."""
        return self._dao

    def say_hello(self) -> str:
        """Return the greeting produced by the bound DAO."""
        return self._dao.hello()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dao={self._dao!r})"


def build_hello_service() -> HelloService:
    """Build a HelloService whose DAO is resolved by `get_hello_dao()`."""
    service = HelloService(get_hello_dao())
    logger.debug("Built %r.", service)
    return service
