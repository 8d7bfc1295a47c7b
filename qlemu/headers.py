"""File headers used to carry QDOS file attributes on foreign media."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

QEMULATOR_SIGNATURE = b"]!QDOS File Header"
QEMULATOR_SHORT_HEADER = 30
QEMULATOR_LONG_HEADER = 44
QEMULATOR_EXTRA_SIZE = QEMULATOR_LONG_HEADER - QEMULATOR_SHORT_HEADER

_QEMU_FIELDS = struct.Struct(">BBBBII")
_QDOS_FIELDS = struct.Struct(">iBBiih36siii")
_NAME_AREA = 36


@dataclass
class QEmulatorHeader:
    """The header Q-emulator places in front of a file's data."""

    access: int = 0
    file_type: int = 0
    data_length: int = 0
    reserved: int = 0
    extra: bytes | None = None

    def __post_init__(self) -> None:
        if self.extra is not None and len(self.extra) != QEMULATOR_EXTRA_SIZE:
            raise ValueError(f"extra information must be {QEMULATOR_EXTRA_SIZE} bytes")

    def to_bytes(self) -> bytes:
        """Encode as the short header, or the long one if ``extra`` is set."""
        size = QEMULATOR_SHORT_HEADER if self.extra is None else QEMULATOR_LONG_HEADER
        fields = _QEMU_FIELDS.pack(
            0, size // 2, self.access, self.file_type, self.data_length, self.reserved
        )
        return QEMULATOR_SIGNATURE + fields + (self.extra or b"")

    @classmethod
    def from_bytes(cls, data: bytes) -> QEmulatorHeader:
        """Decode a header from the start of ``data``."""
        if len(data) < QEMULATOR_SHORT_HEADER:
            raise ValueError("data too short for a Q-emulator header")
        if not data.startswith(QEMULATOR_SIGNATURE):
            raise ValueError("missing Q-emulator header signature")
        _, wordlen, access, file_type, data_length, reserved = _QEMU_FIELDS.unpack_from(
            data, len(QEMULATOR_SIGNATURE)
        )
        size = wordlen * 2
        if size == QEMULATOR_SHORT_HEADER:
            extra = None
        elif size == QEMULATOR_LONG_HEADER:
            if len(data) < QEMULATOR_LONG_HEADER:
                raise ValueError("data too short for a long Q-emulator header")
            extra = bytes(data[QEMULATOR_SHORT_HEADER:QEMULATOR_LONG_HEADER])
        else:
            raise ValueError(f"unsupported Q-emulator header length {size}")
        return cls(access, file_type, data_length, reserved, extra)


@dataclass
class QdosFileHeader:
    """The 64-byte QDOS directory entry and file header."""

    SIZE: ClassVar[int] = _QDOS_FIELDS.size

    length: int = 0
    access: int = 0
    file_type: int = 0
    data_length: int = 0
    reserved: int = 0
    name: str = ""
    update: int = 0
    refdate: int = 0
    backup: int = 0

    def __post_init__(self) -> None:
        if len(self.name.encode("latin-1")) > _NAME_AREA:
            raise ValueError(f"file name longer than {_NAME_AREA} characters")

    def to_bytes(self) -> bytes:
        """Encode as the big-endian on-disk layout."""
        name = self.name.encode("latin-1")
        return _QDOS_FIELDS.pack(
            self.length,
            self.access,
            self.file_type,
            self.data_length,
            self.reserved,
            len(name),
            name,
            self.update,
            self.refdate,
            self.backup,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> QdosFileHeader:
        """Decode a header from the start of ``data``."""
        if len(data) < cls.SIZE:
            raise ValueError("data too short for a QDOS file header")
        (length, access, file_type, data_length, reserved,
         name_size, name_area, update, refdate, backup) = _QDOS_FIELDS.unpack_from(data)
        if not 0 <= name_size <= _NAME_AREA:
            raise ValueError(f"invalid file name length {name_size}")
        return cls(
            length,
            access,
            file_type,
            data_length,
            reserved,
            name_area[:name_size].decode("latin-1"),
            update,
            refdate,
            backup,
        )