# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier generation for bundle-internal ``_id`` values."""

from __future__ import annotations

import uuid
from collections.abc import Callable

# ###############
# Public Interface
# ###############


def random_token() -> str:
    """Return 12 random hex characters."""
    return uuid.uuid4().hex[:12]


class IdGenerator:
    """Issues identifiers that are unique among those this instance has issued.

    One generator is created per bundle assembly, so uniqueness holds within a
    bundle and nothing is remembered across calls.

    Args:
        source: Zero-argument callable producing a fresh token per call.
    """

    def __init__(self, source: Callable[[], str] = random_token) -> None:
        self._source = source
        self._issued: set[str] = set()

    def next(self, prefix: str = "") -> str:
        """Return a new identifier ``prefix + token`` not issued before by this generator."""
        while True:
            candidate = f"{prefix}{self._source()}"
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate

    @property
    def issued(self) -> frozenset[str]:
        return frozenset(self._issued)
