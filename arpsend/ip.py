"""IPv4 addresses held as 32-bit host-order integers."""

from __future__ import annotations

import re

_DOTTED = re.compile(r"\s*(\d+)\.\s*(\d+)\.\s*(\d+)\.\s*(\d+)")
_MASK = 0xFFFFFFFF


class Ip:
    """An immutable IPv4 address."""

    SIZE = 4

    __slots__ = ("_value",)

    def __init__(self, value=0):
        if isinstance(value, Ip):
            number = value._value
        elif isinstance(value, str):
            number = self._parse(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value <= _MASK:
                raise ValueError(f"IPv4 address out of range: {value}")
            number = value
        else:
            raise TypeError(f"cannot build an IPv4 address from {type(value).__name__}")
        self._value = number

    @staticmethod
    def _parse(text: str) -> int:
        match = _DOTTED.match(text)
        if match is None:
            raise ValueError(f"invalid IPv4 address: {text!r}")
        a, b, c, d = (int(part) & _MASK for part in match.groups())
        return ((a << 24) | (b << 16) | (c << 8) | d) & _MASK

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self._value.to_bytes(4, "big"))

    def __repr__(self) -> str:
        return f"Ip('{self}')"

    def __bytes__(self) -> bytes:
        """The address in network byte order."""
        return self._value.to_bytes(self.SIZE, "big")

    def __eq__(self, other) -> bool:
        if isinstance(other, Ip):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def is_local_host(self) -> bool:
        """True for 127.*.*.*."""
        return self._value >> 24 == 0x7F

    def is_broadcast(self) -> bool:
        """True for 255.255.255.255."""
        return self._value == _MASK

    def is_multicast(self) -> bool:
        """True for 224.0.0.0 through 239.255.255.255."""
        return 0xE0 <= self._value >> 24 < 0xF0