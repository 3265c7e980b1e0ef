import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

HEADER_SEPARATOR = b"\r\n\r\n"
CONTENT_LENGTH = "content-length"

INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class LSPProtocolError(Exception):
    pass


class LSPResponseError(Exception):
    code: int
    message: str
    data: object | None

    def __init__(self, code: int, message: str, data: object | None = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"LSP Error {code}: {message}")

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


def encode_message(obj: dict[str, Any]) -> bytes:
    content = json.dumps(obj).encode("utf-8")
    header = f"Content-Length: {len(content)}\r\n\r\n".encode("ascii")
    return header + content


def parse_content_length(header: bytes) -> int | None:
    """Return the declared body length of a header block, or None if it has none.

    Header names are matched case-insensitively; lines without a colon and
    unknown headers (e.g. Content-Type) are ignored.
    """
    try:
        text = header.decode("ascii")
    except UnicodeDecodeError:
        return None

    for line in text.split("\r\n"):
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        if key.strip().lower() != CONTENT_LENGTH:
            continue
        try:
            length = int(value.strip())
        except ValueError:
            return None
        return length if length >= 0 else None

    return None


class MessageReassembler:
    """Turns an arbitrarily chunked byte stream into complete message bodies.

    The buffer is private to the reassembler. Bodies are only emitted once all
    of their declared bytes have arrived, so feeding a stream in one chunk or
    in many yields the same bodies in the same order.
    """

    def __init__(self):
        self._buffer = bytearray()

    @property
    def pending(self) -> int:
        return len(self._buffer)

    def feed(self, chunk: bytes) -> list[bytes]:
        self._buffer.extend(chunk)
        bodies: list[bytes] = []

        while True:
            separator = self._buffer.find(HEADER_SEPARATOR)
            if separator == -1:
                break

            body_start = separator + len(HEADER_SEPARATOR)
            length = parse_content_length(bytes(self._buffer[:separator]))
            if length is None:
                logger.warning(
                    f"Discarding header block without a valid Content-Length: "
                    f"{bytes(self._buffer[:separator])!r}"
                )
                del self._buffer[:body_start]
                continue

            body_end = body_start + length
            if len(self._buffer) < body_end:
                break

            bodies.append(bytes(self._buffer[body_start:body_end]))
            del self._buffer[:body_end]

        return bodies
