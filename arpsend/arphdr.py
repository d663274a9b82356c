"""ARP header for Ethernet and IPv4."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from arpsend.ethhdr import EtherType
from arpsend.ip import Ip
from arpsend.mac import Mac

_FORMAT = struct.Struct("!HHBBH6s4s6s4s")


class HardwareType(enum.IntEnum):
    NETROM = 0
    ETHER = 1
    EETHER = 2
    AX25 = 3
    PRONET = 4
    CHAOS = 5
    IEEE802 = 6
    ARCNET = 7
    APPLETLK = 8
    LANSTAR = 9
    DLCI = 15
    ATM = 19
    METRICOM = 23
    IPSEC = 31


class Operation(enum.IntEnum):
    REQUEST = 1
    REPLY = 2
    REV_REQUEST = 3
    REV_REPLY = 4
    INV_REQUEST = 8
    INV_REPLY = 9


def _as_enum(kind, value: int) -> int:
    try:
        return kind(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class ArpHdr:
    """An ARP packet carrying Ethernet and IPv4 addresses."""

    op: int
    smac: Mac
    sip: Ip
    tmac: Mac
    tip: Ip
    hrd: int = HardwareType.ETHER
    pro: int = EtherType.IP4
    hln: int = Mac.SIZE
    pln: int = Ip.SIZE

    SIZE = _FORMAT.size

    def __post_init__(self):
        for name in ("hrd", "pro", "op"):
            if not 0 <= getattr(self, name) <= 0xFFFF:
                raise ValueError(f"{name} out of range: {getattr(self, name)}")
        for name in ("hln", "pln"):
            if not 0 <= getattr(self, name) <= 0xFF:
                raise ValueError(f"{name} out of range: {getattr(self, name)}")
        object.__setattr__(self, "smac", Mac(self.smac))
        object.__setattr__(self, "tmac", Mac(self.tmac))
        object.__setattr__(self, "sip", Ip(self.sip))
        object.__setattr__(self, "tip", Ip(self.tip))
        object.__setattr__(self, "hrd", _as_enum(HardwareType, self.hrd))
        object.__setattr__(self, "pro", _as_enum(EtherType, self.pro))
        object.__setattr__(self, "op", _as_enum(Operation, self.op))

    def pack(self) -> bytes:
        return _FORMAT.pack(
            self.hrd,
            self.pro,
            self.hln,
            self.pln,
            self.op,
            bytes(self.smac),
            bytes(self.sip),
            bytes(self.tmac),
            bytes(self.tip),
        )

    @classmethod
    def unpack(cls, data) -> ArpHdr:
        """Read a header from the start of data."""
        if len(data) < cls.SIZE:
            raise ValueError(f"ARP header needs {cls.SIZE} bytes, got {len(data)}")
        hrd, pro, hln, pln, op, smac, sip, tmac, tip = _FORMAT.unpack_from(data)
        return cls(
            op=op,
            smac=Mac(smac),
            sip=Ip(int.from_bytes(sip, "big")),
            tmac=Mac(tmac),
            tip=Ip(int.from_bytes(tip, "big")),
            hrd=hrd,
            pro=pro,
            hln=hln,
            pln=pln,
        )