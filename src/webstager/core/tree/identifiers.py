from __future__ import annotations

"""
Node Identifier Generation.

Issues opaque identifiers that stay unique for the lifetime of an editor
session. Supports short random base-36 tokens and a deterministic counter.
"""

import logging
import secrets
from typing import Callable, Iterable, Optional, Set

from webstager.domain import constants as const

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


class IdCollisionError(RuntimeError):
    """Raised when no fresh identifier can be produced."""


# -----------------------------------------------------------------------------
# GENERATOR SERVICE
# -----------------------------------------------------------------------------

class IdGenerator:
    """
    Session-scoped identifier source.

    Every identifier handed out (and every identifier registered through
    `reserve`) is remembered, so a token is never issued twice.
    """

    def __init__(
            self,
            strategy: str = const.DEFAULT_ID_STRATEGY,
            *,
            length: int = const.ID_LENGTH,
            max_draws: int = const.ID_MAX_DRAWS,
            token_source: Optional[Callable[[int], str]] = None,
    ):
        """
        Initialize the generator.

        Args:
            strategy: Either 'random' or 'counter'.
            length: Token length for the random strategy.
            max_draws: Attempts allowed before declaring a collision.
            token_source: Override for the random token function (tests).
        """
        if strategy not in const.ID_STRATEGIES:
            raise ValueError(f"Unknown id strategy '{strategy}'.")

        self.strategy = strategy
        self._length = length
        self._max_draws = max_draws
        self._token_source = token_source or _random_token
        self._issued: Set[str] = set()
        self._counter = 0

    def __call__(self) -> str:
        return self.next_id()

    def next_id(self) -> str:
        """
        Produce a fresh identifier.

        Returns:
            str: Identifier never issued or reserved before.

        Raises:
            IdCollisionError: If the random strategy exhausts its draws.
        """
        if self.strategy == "counter":
            return self._next_counter()

        for _ in range(self._max_draws):
            token = self._token_source(self._length)
            if token not in self._issued:
                self._issued.add(token)
                return token

        logger.critical(f"Identifier space exhausted after {self._max_draws} draws.")
        raise IdCollisionError(
            f"Could not produce a unique identifier after {self._max_draws} draws."
        )

    def reserve(self, ids: Iterable[str]) -> None:
        """Register identifiers already present so they are never issued."""
        self._issued.update(ids)

    def _next_counter(self) -> str:
        while True:
            self._counter += 1
            token = f"{const.ID_COUNTER_PREFIX}{self._counter}"
            if token not in self._issued:
                self._issued.add(token)
                return token


def _random_token(length: int) -> str:
    """Draw a lowercase base-36 token."""
    return "".join(secrets.choice(const.ID_ALPHABET) for _ in range(length))
