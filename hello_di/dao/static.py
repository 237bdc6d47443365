"""
Static implementation of HelloDao.

There is no backing store: the greeting is a constant.  Instances hold no
state, so one instance can be shared by any number of services.
"""

from hello_di.dao.base import HelloDao

GREETING = "Hello"


class StaticHelloDao(HelloDao):
    """HelloDao that always answers with ``"Hello"``."""

    def hello(self) -> str:
        return GREETING

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
