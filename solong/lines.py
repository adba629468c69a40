"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 1024


def _newline_for(data: AnyStr) -> AnyStr:
    return b"\n" if isinstance(data, (bytes, bytearray)) else "\n"  # type: ignore[return-value]


class LineReader(Generic[AnyStr]):
    """Return successive lines from a text or binary stream.

    The stream is read in chunks of ``buffer_size``; data read past the end
    of a line is kept for the next call. Each line keeps its trailing
    newline; the last line may have none.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _has_line(self) -> bool:
        pending = self._pending
        return bool(pending) and _newline_for(pending) in pending

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while not self._has_line():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk

        pending = self._pending
        if not pending:
            self._pending = None
            return None

        end = pending.find(_newline_for(pending))
        if end < 0:
            self._pending = None
            return pending
        rest = pending[end + 1:]
        self._pending = rest if rest else None
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line