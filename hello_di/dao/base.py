"""
Abstract DAO (Data Access Object) for greetings.

`HelloDao` is the capability contract the service layer depends on.  Concrete
implementations (the static DAO, hand-written test doubles, …) must fulfil
this interface without the service knowing which one it was handed.

ABC with a structural hook
──────────────────────────
`ABC` + `abstractmethod` gives runtime enforcement for subclasses: a subclass
that forgets `hello` cannot be instantiated.  `__subclasshook__` additionally
lets any class that defines a callable `hello` pass `isinstance` checks, so a
test double does not have to inherit from `HelloDao`.
"""

from abc import ABC, abstractmethod

from hello_di.exceptions import InvalidDependencyError


class HelloDao(ABC):
    """Source of the greeting text."""

    @abstractmethod
    def hello(self) -> str:
        """Return the greeting text.  Takes no input and never fails."""

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is HelloDao:
            return callable(getattr(subclass, "hello", None)) or NotImplemented
        return NotImplemented


def require_hello_dao(dao: object) -> HelloDao:
    """
    Return *dao* unchanged if it satisfies the HelloDao contract.

    Raises ``InvalidDependencyError`` for ``None`` or for objects without a
    callable ``hello``.  The object itself is inspected, so doubles that only
    gain ``hello`` at runtime (``SimpleNamespace``, ``unittest.mock.Mock``) pass.
    """
    if dao is None:
        raise InvalidDependencyError("A HelloDao is required, got None.")
    if not callable(getattr(dao, "hello", None)):
        raise InvalidDependencyError(
            f"{type(dao).__name__!r} does not implement HelloDao (missing hello())."
        )
    return dao
