"""Big-endian emulated memory for the 68000 address space."""

from __future__ import annotations


class QLMemory:
    """A flat block of big-endian memory addressed from zero."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"memory size must be positive, not {size}")
        self._data = bytearray(size)

    def __len__(self) -> int:
        return len(self._data)

    def _check(self, address: int, length: int) -> None:
        if address < 0 or address + length > len(self._data):
            raise IndexError(
                f"access of {length} bytes at {address:#x} is outside memory "
                f"of {len(self._data):#x} bytes"
            )

    def read_word(self, address: int) -> int:
        """Read an unsigned 16-bit big-endian value."""
        self._check(address, 2)
        return int.from_bytes(self._data[address:address + 2], "big")

    def read_long(self, address: int) -> int:
        """Read an unsigned 32-bit big-endian value."""
        self._check(address, 4)
        return int.from_bytes(self._data[address:address + 4], "big")

    def write_word(self, address: int, value: int) -> None:
        """Write the low 16 bits of ``value`` big-endian."""
        self._check(address, 2)
        self._data[address:address + 2] = (value & 0xFFFF).to_bytes(2, "big")

    def write_long(self, address: int, value: int) -> None:
        """Write the low 32 bits of ``value`` big-endian."""
        self._check(address, 4)
        self._data[address:address + 4] = (value & 0xFFFFFFFF).to_bytes(4, "big")

    def read_bytes(self, address: int, length: int) -> bytes:
        """Return ``length`` bytes starting at ``address``."""
        if length < 0:
            raise ValueError(f"length must not be negative, not {length}")
        self._check(address, length)
        return bytes(self._data[address:address + length])

    def write_bytes(self, address: int, data: bytes) -> None:
        """Copy ``data`` into memory at ``address``."""
        self._check(address, len(data))
        self._data[address:address + len(data)] = data