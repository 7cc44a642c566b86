"""
Per-placeholder slide data used by the template generation path.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from deckstudio.domain.exceptions import ValidationError

IMAGE_REF_PREFIXES = ("http://", "https://", "data:image/")


def looks_like_image_ref(value: str) -> bool:
    """Prefix check for remote URLs and inline image data URIs."""
    return value.lower().startswith(IMAGE_REF_PREFIXES)


@dataclass(frozen=True)
class TextValue:
    value: str
    kind: str = field(default="text", init=False)

    def as_text(self) -> str:
        return self.value

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "value": self.value}


@dataclass(frozen=True)
class ImageValue:
    ref: str
    kind: str = field(default="image", init=False)

    def as_text(self) -> str:
        return self.ref

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "ref": self.ref}


PlaceholderValue = Union[TextValue, ImageValue]


def to_placeholder_value(raw: Any) -> PlaceholderValue:
    """Coerce boundary input into the tagged union.

    Plain strings are classified once, here, by prefix. Tagged dicts are
    taken at their word.
    """
    if isinstance(raw, (TextValue, ImageValue)):
        return raw
    if isinstance(raw, str):
        return ImageValue(ref=raw) if looks_like_image_ref(raw) else TextValue(value=raw)
    if isinstance(raw, Mapping):
        kind = raw.get("kind")
        if kind == "image" and isinstance(raw.get("ref"), str):
            return ImageValue(ref=raw["ref"])
        if kind == "text" and isinstance(raw.get("value"), str):
            return TextValue(value=raw["value"])
    raise ValidationError(f"Unsupported placeholder value: {raw!r}")


@dataclass(frozen=True)
class SlideData:
    master_name: str
    data: Dict[str, PlaceholderValue] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, master_name: str, data: Mapping[str, Any]) -> "SlideData":
        return cls(
            master_name=master_name,
            data={key: to_placeholder_value(value) for key, value in data.items()},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "master_name": self.master_name,
            "data": {key: value.to_dict() for key, value in self.data.items()},
        }
