"""Decoded protocol fields and bounds-checked byte access."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type, Union


class TruncatedPacketError(ValueError):
    """Raised when a field extends past the end of the packet."""

    def __init__(self, offset: int, length: int, available: int) -> None:
        super().__init__(
            f"packet truncated: need {length} byte(s) at offset {offset}, "
            f"packet has {available}"
        )
        self.offset = offset
        self.length = length
        self.available = available


def read_uint8(data: bytes, offset: int) -> int:
    """Return the byte at ``offset``, raising TruncatedPacketError if absent."""
    if offset < 0 or offset >= len(data):
        raise TruncatedPacketError(offset, 1, len(data))
    return data[offset]


def _bit_pattern(value: int, mask: int) -> str:
    shift = (mask & -mask).bit_length() - 1
    shifted = value << shift
    chars = "".join(
        str((shifted >> bit) & 1) if (mask >> bit) & 1 else "."
        for bit in range(7, -1, -1)
    )
    return f"{chars[:4]} {chars[4:]}"


@dataclass(frozen=True)
class Field:
    """One decoded field: where it lies in the packet and what it holds."""

    name: str
    abbrev: str
    offset: int
    length: int
    value: Union[int, bytes]
    labels: Optional[Type[Enum]] = None
    mask: int = 0
    unit: str = ""

    def render(self) -> str:
        """Return the one-line text shown for this field."""
        if isinstance(self.value, bytes):
            text = self.value.hex()
        elif self.labels is not None:
            try:
                member = self.labels(self.value)
                label = getattr(member, "label", None) or member.name or "Unknown"
            except ValueError:
                label = "Unknown"
            text = f"{label} ({self.value})"
        else:
            text = str(self.value)
        line = f"{self.name}: {text}{self.unit}"
        if self.mask and isinstance(self.value, int):
            line = f"{_bit_pattern(self.value, self.mask)} = {line}"
        return line