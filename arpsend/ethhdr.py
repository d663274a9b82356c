"""Ethernet II frame header."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from arpsend.mac import Mac

_FORMAT = struct.Struct("!6s6sH")


class EtherType(enum.IntEnum):
    IP4 = 0x0800
    ARP = 0x0806
    IP6 = 0x86DD


def _ether_type(value: int) -> int:
    try:
        return EtherType(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class EthHdr:
    """Destination, source and EtherType of an Ethernet frame."""

    dmac: Mac
    smac: Mac
    ether_type: int

    SIZE = _FORMAT.size

    def __post_init__(self):
        object.__setattr__(self, "dmac", Mac(self.dmac))
        object.__setattr__(self, "smac", Mac(self.smac))
        if not 0 <= self.ether_type <= 0xFFFF:
            raise ValueError(f"EtherType out of range: {self.ether_type}")
        object.__setattr__(self, "ether_type", _ether_type(self.ether_type))

    def pack(self) -> bytes:
        return _FORMAT.pack(bytes(self.dmac), bytes(self.smac), self.ether_type)

    @classmethod
    def unpack(cls, data) -> EthHdr:
        """Read a header from the start of data."""
        if len(data) < cls.SIZE:
            raise ValueError(f"Ethernet header needs {cls.SIZE} bytes, got {len(data)}")
        dmac, smac, ether_type = _FORMAT.unpack_from(data)
        return cls(Mac(dmac), Mac(smac), ether_type)