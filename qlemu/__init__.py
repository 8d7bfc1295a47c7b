"""Sinclair QL emulator support: big-endian memory, extended screen patching, key codes, file headers and IP trap numbers."""

__version__ = "0.1.0"

__all__ = ["memory", "geometry", "xscreen", "headers", "keys", "iptraps"]