"""Bridge between FastAPI dependencies and the service container."""

import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.core import container
from flashdeck.database import DatabaseSession

ServiceT = TypeVar("ServiceT")

# container.db is process-wide; sync dependencies run in a threadpool
_container_lock = threading.Lock()


def inject_service(provider: Provider[ServiceT]) -> Callable[[DatabaseSession], ServiceT]:
    """
    Build a FastAPI dependency that resolves a service from the container.

    The service graph is created against the request's database session,
    so every repository a service touches shares one transaction. The
    override, build and reset happen under a lock; the built graph holds
    the session directly and is never shared between requests.
    """

    def dependency(db: DatabaseSession) -> ServiceT:
        with _container_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return dependency
