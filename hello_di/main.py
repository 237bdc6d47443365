"""
Entry points for the greeting example.  Each one is a composition root.

Run locally:
    hello-traditional        # caller builds the DAO and injects it
    hello-factory            # service resolves its own DAO
    python -m hello_di.main  # same as hello-factory

Both print the greeting to stdout and exit with status 0.  Log records go to
stderr; set HELLO_DI_LOG_LEVEL=DEBUG to see which DAO was resolved.
"""

import logging

from hello_di.config import settings
from hello_di.dao.static import StaticHelloDao
from hello_di.services.hello import HelloService, build_hello_service

logger = logging.getLogger(__name__)


# ── Logging ───────────────────────────────────────────────────────────────────
def configure_logging() -> None:
    logging.basicConfig(level=settings.get_log_level(), format=settings.log_format)


# ── Entry points ──────────────────────────────────────────────────────────────
def main_traditional() -> int:
    """Wire the service by hand: the DAO is built here and passed in."""
    configure_logging()
    logger.info("Wiring HelloService with explicit injection.")

    service = HelloService(StaticHelloDao())
    print(service.say_hello())
    return 0


def main_factory() -> int:
    """Let the service factory resolve the DAO (override slot first)."""
    configure_logging()
    logger.info("Wiring HelloService through build_hello_service().")

    service = build_hello_service()
    print(service.say_hello())
    return 0


if __name__ == "__main__":
    raise SystemExit(main_factory())
