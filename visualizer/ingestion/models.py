from dataclasses import dataclass


@dataclass(frozen=True)
class Upload:
    """One uploaded file. An empty ``media_type`` is guessed from ``file_name``."""

    data: bytes
    media_type: str
    file_name: str
