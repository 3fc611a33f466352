"""Latest-request gate for overlapping fetches."""

from __future__ import annotations

import logging
from typing import TypeVar

from ..core.errors import StaleResponseError

logger = logging.getLogger("nok_exr_client")

T = TypeVar("T")


class LatestRequestGate:
    """Hands out monotonic generation tokens; only the newest may be applied."""

    def __init__(self) -> None:
        self._generation = 0

    @property
    def latest(self) -> int:
        return self._generation

    def begin(self) -> int:
        self._generation += 1
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def stale_error(self, generation: int) -> StaleResponseError:
        logger.info(
            "discarding stale response generation=%s latest=%s",
            generation,
            self._generation,
        )
        return StaleResponseError(
            "response superseded by a newer request",
            generation=generation,
            latest_generation=self._generation,
        )

    def accept(self, generation: int, result: T) -> T:
        if not self.is_current(generation):
            raise self.stale_error(generation)
        return result


__all__ = [
    "LatestRequestGate",
]
