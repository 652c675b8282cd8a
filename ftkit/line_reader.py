"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 5
"""Default number of characters (or bytes) requested per read."""


class LineReader(Generic[AnyStr]):
    """Split the data of a text or binary stream into lines.

    The stream is read in chunks of ``buffer_size`` items. Only as many
    chunks are read as are needed to reach the next newline. Data left over
    after that newline is kept for the following call. Each line keeps its
    trailing newline. The last line lacks one if the stream does not end
    with a newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def _fill(self) -> AnyStr | None:
        """Read chunks until the held data contains a newline or the stream ends."""
        pending = self._pending
        if pending is not None and self._newline(pending) in pending:
            return pending
        chunks: list[AnyStr] = [] if pending is None else [pending]
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            chunks.append(chunk)
            if self._newline(chunk) in chunk:
                break
        if not chunks:
            return None
        return chunks[0][:0].join(chunks)

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream has nothing left."""
        data = self._fill()
        if not data:
            self._pending = None
            return None
        end = data.find(self._newline(data))
        if end == -1:
            self._pending = None
            return data
        line, rest = data[: end + 1], data[end + 1 :]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line