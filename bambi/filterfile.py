"""Reader for Illumina ``.filter`` files (per-cluster pass-filter flags)."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO, Iterator

_HEADER = struct.Struct("<3I")


class FilterFileError(Exception):
    """Raised when a filter file cannot be opened, read or positioned."""


class FilterFile:
    """An open Illumina filter file.

    The file starts with a 12-byte header of three little-endian 32-bit
    words (unused, version, cluster count), followed by one byte per
    cluster whose lowest bit is the pass-filter flag.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.version = 0
        self.total_clusters = 0
        self.current_cluster = 0
        self.buffer = b""
        try:
            self._handle: BinaryIO | None = open(self.path, "rb")
        except OSError as exc:
            raise FilterFileError(f"can't open {self.path}: {exc.strerror}") from exc
        header = self._handle.read(_HEADER.size)
        if len(header) != _HEADER.size:
            self._handle.close()
            self._handle = None
            raise FilterFileError(f"failed to read header from {self.path}")
        _, self.version, self.total_clusters = _HEADER.unpack(header)

    def _file(self) -> BinaryIO:
        if self._handle is None:
            raise FilterFileError(f"filter file {self.path} is closed")
        return self._handle

    def close(self) -> None:
        """Close the underlying file and drop any loaded buffer."""
        if self._handle is not None:
            try:
                self._handle.close()
            except OSError as exc:
                raise FilterFileError("can't close filter file") from exc
            finally:
                self._handle = None
        self.buffer = b""

    def seek(self, cluster: int) -> None:
        """Position the file at the flag byte for ``cluster``."""
        try:
            self._file().seek(_HEADER.size + cluster)
        except (OSError, ValueError) as exc:
            raise FilterFileError(f"seek({cluster}) failed: {exc}") from exc

    def load(self, clusters: int) -> None:
        """Read ``clusters`` flag bytes from the current position into memory."""
        data = self._file().read(clusters)
        if len(data) != clusters:
            raise FilterFileError(
                f"load(): expected {clusters} clusters, read {len(data)}"
            )
        self.buffer = data
        self.total_clusters = clusters

    def get(self, n: int) -> int:
        """Return the pass-filter flag of cluster ``n`` from the loaded buffer."""
        if not 0 <= n < len(self.buffer):
            raise IndexError(f"cluster {n} outside loaded buffer of {len(self.buffer)}")
        return self.buffer[n] & 0x01

    def next(self) -> int | None:
        """Read the next cluster's flag, or return None at end of file."""
        byte = self._file().read(1)
        if len(byte) != 1:
            return None
        self.current_cluster += 1
        return byte[0] & 0x01

    def __iter__(self) -> Iterator[int]:
        while (flag := self.next()) is not None:
            yield flag

    def __enter__(self) -> "FilterFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()