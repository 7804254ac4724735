from collections.abc import Iterable, Mapping

MAGIC_BYTES: Mapping[bytes, str] = {
    b"\xff\xd8\xff": "image/jpeg",
    b"\x89PNG\r\n\x1a\n": "image/png",
    b"GIF87a": "image/gif",
    b"GIF89a": "image/gif",
}


def detect_mime_type(file_data: bytes) -> str:
    for signature, mime in MAGIC_BYTES.items():
        if file_data.startswith(signature):
            return mime

    if file_data[:4] == b"RIFF" and file_data[8:12] == b"WEBP":
        return "image/webp"

    raise ValueError("Unsupported or unknown file type")


class MimeMap:
    """Allow-list of upload content types.

    Membership is an exact, case-sensitive string match. The rendered list
    has no guaranteed order.
    """

    def __init__(self, allowed: Iterable[str]) -> None:
        self._allowed: frozenset[str] = frozenset(allowed)

    def valid(self, mime_type: str) -> bool:
        return mime_type in self._allowed

    def list(self) -> str:
        return ", ".join(self._allowed)

    def __len__(self) -> int:
        return len(self._allowed)

    def __repr__(self) -> str:
        return f"MimeMap({sorted(self._allowed)!r})"
