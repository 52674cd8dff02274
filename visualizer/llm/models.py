import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class TextPart:
    """Plain text content sent to the model.

    ``cacheable`` marks content that repeats verbatim across turns so that
    providers with explicit prompt caching can reuse it.
    """

    text: str
    cacheable: bool = False


@dataclass(frozen=True)
class BinaryPart:
    """Binary content (image or PDF) sent to the model as-is."""

    data: bytes
    media_type: str
    file_name: str = ""

    @property
    def is_image(self) -> bool:
        return self.media_type.startswith("image/")

    @property
    def is_pdf(self) -> bool:
        return self.media_type == "application/pdf"

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


ContentPart = TextPart | BinaryPart
