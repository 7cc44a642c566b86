"""
Slide content model: the master-agnostic tree stored for each presentation.

Stored documents use the editor's JSON shape::

    {"slides": [{"id": "...", "content": [
        {"type": "h1", "children": [{"text": "Title"}]},
        {"type": "img", "url": "https://..."},
    ]}]}

Parsing drops empty text runs and image nodes without a URL, so a parsed
tree never serializes an empty leaf.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from deckstudio.domain.exceptions import ValidationError
from deckstudio.domain.value_objects.slide_data import looks_like_image_ref

IMAGE_NODE_TYPES = ("img", "image")


@dataclass(frozen=True)
class TextNode:
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class ImageNode:
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "img", "url": self.url}


@dataclass(frozen=True)
class ContainerNode:
    element_type: str = "p"
    children: Tuple["SlideContentNode", ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.element_type,
            "children": [child.to_dict() for child in self.children],
        }


SlideContentNode = Union[TextNode, ImageNode, ContainerNode]


@dataclass(frozen=True)
class Slide:
    content: Tuple[SlideContentNode, ...] = ()
    id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"content": [node.to_dict() for node in self.content]}
        if self.id is not None:
            data["id"] = self.id
        return data


def walk(nodes: Tuple[SlideContentNode, ...]) -> Iterator[SlideContentNode]:
    """Depth-first, pre-order traversal yielding leaves in document order."""
    for node in nodes:
        if isinstance(node, ContainerNode):
            yield from walk(node.children)
        else:
            yield node


def parse_node(raw: Any, path: str = "node") -> Optional[SlideContentNode]:
    """Parse one editor node. Returns None for empty leaves."""
    if not isinstance(raw, dict):
        raise ValidationError(f"{path}: content node must be an object")

    if raw.get("type") in IMAGE_NODE_TYPES:
        url = raw.get("url")
        if url is not None and not isinstance(url, str):
            raise ValidationError(f"{path}: image url must be a string")
        if url and not looks_like_image_ref(url):
            raise ValidationError(f"{path}: image url must be http(s) or a data:image URI")
        return ImageNode(url=url) if url else None

    if "children" in raw:
        children = raw["children"]
        if not isinstance(children, list):
            raise ValidationError(f"{path}: children must be a list")
        parsed = [
            parse_node(child, f"{path}.children[{i}]")
            for i, child in enumerate(children)
        ]
        return ContainerNode(
            element_type=str(raw.get("type") or "p"),
            children=tuple(node for node in parsed if node is not None),
        )

    if "text" in raw:
        text = raw["text"]
        if not isinstance(text, str):
            raise ValidationError(f"{path}: text must be a string")
        return TextNode(text=text) if text else None

    raise ValidationError(f"{path}: unsupported content node")


def parse_slide(raw: Any, index: int = 0) -> Slide:
    if not isinstance(raw, dict):
        raise ValidationError(f"slides[{index}] must be an object")
    content = raw.get("content") or []
    if not isinstance(content, list):
        raise ValidationError(f"slides[{index}].content must be a list")
    nodes = [
        parse_node(node, f"slides[{index}].content[{i}]")
        for i, node in enumerate(content)
    ]
    slide_id = raw.get("id")
    return Slide(
        content=tuple(node for node in nodes if node is not None),
        id=str(slide_id) if slide_id is not None else None,
    )


def parse_slides(content: Optional[Dict[str, Any]]) -> List[Slide]:
    """Parse the ``slides`` list of a stored content document."""
    if content is None:
        return []
    if not isinstance(content, dict):
        raise ValidationError("Presentation content must be an object")
    slides = content.get("slides") or []
    if not isinstance(slides, list):
        raise ValidationError("Presentation content 'slides' must be a list")
    return [parse_slide(raw, i) for i, raw in enumerate(slides)]


def empty_content() -> Dict[str, Any]:
    return {"slides": []}
