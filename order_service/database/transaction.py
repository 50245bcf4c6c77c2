"""Transactional scope over the in-memory stores.

Every store taking part exposes ``snapshot()`` and ``restore(state)``. The
scope records a snapshot of each store on entry; if the body raises
(cancellation included) every store is restored before the exception
propagates.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Protocol

logger = logging.getLogger(__name__)


class Snapshottable(Protocol):
    def snapshot(self) -> dict: ...

    def restore(self, state: dict) -> None: ...


@asynccontextmanager
async def transaction(*stores: Snapshottable, name: str = "transaction") -> AsyncIterator[None]:
    """Run the body as one unit: all store writes apply, or none do"""
    states = [(store, store.snapshot()) for store in stores]
    try:
        yield
    except BaseException as e:
        logger.error(f"{name} failed, rolling back {len(states)} store(s): {e!r}")
        for store, state in reversed(states):
            store.restore(state)
        raise
    logger.debug(f"{name} committed")
