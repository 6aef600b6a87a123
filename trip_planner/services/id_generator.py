"""
Trip id generation.

Two strategies are available, picked by ``settings.id_strategy``:

- ``uuid``: random UUID4 hex strings, unique across restarts.
- ``counter``: a monotonic per-process counter ("trip-1", "trip-2", ...),
  handy for readable ids in demos and tests.

Both stay unique under rapid successive inserts, unlike a wall-clock id.
"""
import itertools
import uuid
from typing import Callable


IdGenerator = Callable[[], str]


def uuid_id_generator() -> IdGenerator:
    """Generator returning a fresh UUID4 hex string per call."""
    def generate() -> str:
        return uuid.uuid4().hex
    return generate


def counter_id_generator(prefix: str = "trip", start: int = 1) -> IdGenerator:
    """Generator returning ``<prefix>-<n>`` with n increasing by one per call."""
    counter = itertools.count(start)

    def generate() -> str:
        return f"{prefix}-{next(counter)}"
    return generate


def get_id_generator(strategy: str) -> IdGenerator:
    """Build the id generator for a configured strategy name."""
    if strategy == "uuid":
        return uuid_id_generator()
    if strategy == "counter":
        return counter_id_generator()
    raise ValueError(f"Unknown id strategy: {strategy}")
