"""Network identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_U32_LIMIT = 1 << 32


@dataclass(frozen=True, order=True)
class Network:
    """A network, identified by its 32-bit coin type."""

    code: int

    BITCOIN: ClassVar[Network]
    ETHEREUM: ClassVar[Network]
    CARDANO: ClassVar[Network]

    def __post_init__(self) -> None:
        if not isinstance(self.code, int) or isinstance(self.code, bool):
            raise TypeError("network code must be an integer")
        if not 0 <= self.code < _U32_LIMIT:
            raise ValueError(f"network code {self.code} does not fit in 32 bits")

    def __str__(self) -> str:
        return f"Network({self.code})"


Network.BITCOIN = Network(0x80000000)
Network.ETHEREUM = Network(0x8000003C)
Network.CARDANO = Network(0x80000717)