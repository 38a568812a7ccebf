"""Line-oriented input for readers.

A StreamDelegate hides whether the reader was handed a raw byte stream or a
text file object. The reader only ever asks two things of it: whether input
is exhausted, and the next line.
"""

import io
from pathlib import Path
from typing import IO, Any, Optional, Union

from xml_struct_reader.shared.errors import InvalidArgumentError

Line = Union[str, bytes]


class StreamDelegate:
    """Delegate for reading lines across byte streams and text file objects.

    End of input is detected by looking one line ahead, so ``is_eof`` is
    accurate even for streams that cannot report their size.
    """

    def __init__(self, file: Any, owns_file: bool = False) -> None:
        """Create a delegate given a stream or file object.

        Args:
            file: Binary or text file-like object exposing ``readline``
            owns_file: Whether ``close`` should close the wrapped file

        Raises:
            InvalidArgumentError: If ``file`` is not a readable stream
        """
        if file is None or not callable(getattr(file, "readline", None)):
            raise InvalidArgumentError("File is not a valid stream or file object.")

        self._file: IO[Any] = file
        self._owns_file = owns_file
        self._pending: Optional[Line] = None
        self._closed = False

    @classmethod
    def open(cls, path: Union[str, Path]) -> "StreamDelegate":
        """Open a file in binary mode and wrap it in an owning delegate."""
        return cls(open(path, "rb"), owns_file=True)

    @property
    def is_binary(self) -> bool:
        """Whether the wrapped object is a raw byte stream."""
        if isinstance(self._file, io.TextIOBase):
            return False
        if isinstance(self._file, (io.RawIOBase, io.BufferedIOBase)):
            return True
        return "b" in getattr(self._file, "mode", "")

    @property
    def owns_file(self) -> bool:
        return self._owns_file

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def name(self) -> Optional[str]:
        name = getattr(self._file, "name", None)
        return str(name) if name is not None else None

    def is_eof(self) -> bool:
        """Check whether the stream has no more lines."""
        if self._closed:
            return True
        if self._pending is None:
            self._pending = self._file.readline()
        return not self._pending

    def read_line(self) -> Line:
        """Read the next line including its terminator.

        Returns an empty string or bytes object once input is exhausted.
        """
        if self.is_eof():
            return b"" if self.is_binary else ""
        line, self._pending = self._pending, None
        return line

    def close(self) -> None:
        """Close the wrapped file if this delegate opened it."""
        if self._closed:
            return
        self._closed = True
        self._pending = None
        if self._owns_file:
            self._file.close()
