"""Ethernet hardware (MAC) addresses."""

from __future__ import annotations

import functools
import os
import re

_HEX_PAIR = re.compile(r"[0-9A-Fa-f]{1,2}")
_NOT_HEX = re.compile(r"[^0-9A-Fa-f]")


@functools.total_ordering
class Mac:
    """An immutable six-octet Ethernet address."""

    SIZE = 6

    __slots__ = ("_octets",)

    def __init__(self, value=None):
        if value is None:
            octets = bytes(self.SIZE)
        elif isinstance(value, Mac):
            octets = value._octets
        elif isinstance(value, str):
            octets = self._parse(value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            octets = bytes(value)
            if len(octets) != self.SIZE:
                raise ValueError(
                    f"MAC address needs {self.SIZE} octets, got {len(octets)}"
                )
        else:
            raise TypeError(f"cannot build a MAC address from {type(value).__name__}")
        self._octets = octets

    @classmethod
    def _parse(cls, text: str) -> bytes:
        digits = _NOT_HEX.sub("", text)[: cls.SIZE * 2]
        pairs = _HEX_PAIR.findall(digits)
        if len(pairs) != cls.SIZE:
            raise ValueError(f"invalid MAC address: {text!r}")
        return bytes(int(pair, 16) for pair in pairs)

    def __str__(self) -> str:
        return ":".join(f"{octet:02X}" for octet in self._octets)

    def __repr__(self) -> str:
        return f"Mac('{self}')"

    def __bytes__(self) -> bytes:
        return self._octets

    def __eq__(self, other) -> bool:
        if isinstance(other, Mac):
            return self._octets == other._octets
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._octets == bytes(other)
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, Mac):
            return self._octets < other._octets
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._octets)

    def is_null(self) -> bool:
        """True for 00:00:00:00:00:00."""
        return self == self.null_mac()

    def is_broadcast(self) -> bool:
        """True for FF:FF:FF:FF:FF:FF."""
        return self == self.broadcast_mac()

    def is_multicast(self) -> bool:
        """True for IPv4 multicast addresses, 01:00:5E:0x:xx:xx."""
        first, second, third, fourth = self._octets[:4]
        return first == 0x01 and second == 0x00 and third == 0x5E and not fourth & 0x80

    @classmethod
    def random_mac(cls) -> Mac:
        """A random address with the top bit of the first octet cleared."""
        octets = bytearray(os.urandom(cls.SIZE))
        octets[0] &= 0x7F
        return cls(bytes(octets))

    @classmethod
    def null_mac(cls) -> Mac:
        return cls(bytes(cls.SIZE))

    @classmethod
    def broadcast_mac(cls) -> Mac:
        return cls(b"\xff" * cls.SIZE)