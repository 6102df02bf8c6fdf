"""
Structured content part model.

Providers may emit or accept content as multiple parts (text, images, tool
calls). ``ContentPart`` captures a normalized, provider-agnostic shape. Image
parts carry a MIME type and an :class:`ImageSource` that is either a remote
URL or inline base64 data.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

ContentPartType = Literal[
    "text",          # Plain text content
    "image",         # Image content (url or base64 source)
    "tool_call",     # Tool call metadata
    "other",         # Catch-all
]

ImageSourceKind = Literal["url", "base64"]


@dataclass(frozen=True)
class ImageSource:
    """Where an image's bytes live: a remote URL or embedded base64 data."""

    kind: ImageSourceKind
    value: str

    @property
    def is_url(self) -> bool:
        return self.kind == "url"

    @property
    def is_base64(self) -> bool:
        return self.kind == "base64"


@dataclass
class ContentPart:
    """A single piece of structured content.

    Attributes:
        type: The semantic kind of the part.
        text: Text content for ``"text"`` parts.
        content_type: MIME type for ``"image"`` parts (e.g. ``"image/png"``).
        source: Image location for ``"image"`` parts.
        data: Optional adapter-specific payload for other parts.
    """

    type: ContentPartType
    text: Optional[str] = None
    content_type: Optional[str] = None
    source: Optional[ImageSource] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def from_text(cls, text: str) -> "ContentPart":
        return cls(type="text", text=text)

    @classmethod
    def from_image_url(cls, url: str, content_type: str = "image/png") -> "ContentPart":
        return cls(type="image", content_type=content_type, source=ImageSource("url", url))

    @classmethod
    def from_image_base64(cls, data: str, content_type: str = "image/png") -> "ContentPart":
        return cls(type="image", content_type=content_type, source=ImageSource("base64", data))

    def is_image(self) -> bool:
        return self.type == "image" and self.source is not None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary, omitting unset fields."""
        out: Dict[str, Any] = {"type": self.type}
        if self.text is not None:
            out["text"] = self.text
        if self.content_type is not None:
            out["content_type"] = self.content_type
        if self.source is not None:
            out["source"] = {"kind": self.source.kind, "value": self.source.value}
        if self.data is not None:
            out["data"] = self.data
        return out


__all__ = ["ContentPart", "ContentPartType", "ImageSource", "ImageSourceKind"]
