"""Sources of random bytes."""

from __future__ import annotations

import abc
import os


class Entropy(abc.ABC):
    """A source of random bytes."""

    @abc.abstractmethod
    def random_bytes(self, size: int) -> bytes:
        """Return ``size`` random bytes."""


class OsEntropy(Entropy):
    """Random bytes from the operating system's secure generator."""

    def random_bytes(self, size: int) -> bytes:
        return os.urandom(size)