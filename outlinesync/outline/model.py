"""Outline tree model and notification parsing.

The analysis server publishes one notification per document:

    {"uri": "file:///...", "outline": <node>}

where every node looks like

    {
        "element": {"name": ..., "kind": ..., "range": <range>,
                    "parameters": ..., "typeParameters": ..., "returnType": ...},
        "range": <range>,
        "codeRange": <range>,
        "children": [<node>, ...],
        "folded": false
    }

The schema is fixed by the server; unknown element kinds are tolerated.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from outlinesync.core.errors import OutlineParseError
from outlinesync.core.types import Position, Range

_EMPTY_RANGE = Range(Position(0, 0), Position(0, 0))


class ElementKind(Enum):
    """Category of an outline element, used to pick its icon."""

    TOP_LEVEL_VARIABLE = "TOP_LEVEL_VARIABLE"
    CLASS = "CLASS"
    FIELD = "FIELD"
    CONSTRUCTOR = "CONSTRUCTOR"
    CONSTRUCTOR_INVOCATION = "CONSTRUCTOR_INVOCATION"
    FUNCTION = "FUNCTION"
    METHOD = "METHOD"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_wire(cls, value: Any) -> ElementKind:
        """Map a wire kind string to a member, UNKNOWN for anything else."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


# eq=False keeps identity hashing: nodes are used as keys for render spans.
@dataclass(eq=False)
class OutlineNode:
    """One element of an outline tree.

    Attributes:
        name: Display label.
        kind: Element category.
        source_range: Span of the declaration itself.
        code_range: Span of the full body; used for cursor containment.
        children: Child nodes in source order.
        folded: Advisory collapse flag.
        parameters: Parameter list text, if the element has one.
        type_parameters: Type parameter text, if any.
        return_type: Return type text, if any.
    """

    name: str
    kind: ElementKind = ElementKind.UNKNOWN
    source_range: Range = _EMPTY_RANGE
    code_range: Range = _EMPTY_RANGE
    children: list[OutlineNode] = field(default_factory=list)
    folded: bool = False
    parameters: str | None = None
    type_parameters: str | None = None
    return_type: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> OutlineNode:
        """Create a node (and its subtree) from a wire outline object.

        Raises:
            OutlineParseError: If the object or any descendant is malformed.
        """
        if not isinstance(data, dict):
            raise OutlineParseError(f"Expected outline object, got {type(data).__name__}")
        element = data.get("element")
        if not isinstance(element, dict):
            raise OutlineParseError("Outline node is missing its element")
        name = element.get("name")
        if not isinstance(name, str):
            raise OutlineParseError(f"Outline element has no name: {element!r}")
        if "codeRange" not in data:
            raise OutlineParseError(f"Outline node '{name}' is missing codeRange")

        declaration = element.get("range", data.get("range"))
        children = data.get("children") or []
        if not isinstance(children, list):
            raise OutlineParseError(f"Children of '{name}' must be a list")

        return cls(
            name=name,
            kind=ElementKind.from_wire(element.get("kind")),
            source_range=Range.from_dict(declaration) if declaration is not None else _EMPTY_RANGE,
            code_range=Range.from_dict(data["codeRange"]),
            children=[cls.from_dict(child) for child in children],
            folded=bool(data.get("folded", False)),
            parameters=element.get("parameters"),
            type_parameters=element.get("typeParameters"),
            return_type=element.get("returnType"),
        )

    @property
    def declaration_line(self) -> int:
        """1-indexed line of the declaration, as shown in line-number mode."""
        return self.source_range.start.line + 1

    @property
    def signature(self) -> str:
        """Name with type parameters, parameters and return type when present."""
        text = self.name
        if self.type_parameters:
            text += self.type_parameters
        if self.parameters:
            text += self.parameters
        if self.return_type:
            text += f" → {self.return_type}"
        return text

    def walk(self) -> Iterator[OutlineNode]:
        """Yield this node's descendants in pre-order (self excluded)."""
        for child in self.children:
            yield child
            yield from child.walk()


@dataclass(frozen=True)
class OutlineNotification:
    """A parsed outline notification for one document."""

    uri: str
    outline: OutlineNode

    @classmethod
    def from_dict(cls, data: Any) -> OutlineNotification:
        """Create from the notification params.

        Raises:
            OutlineParseError: If the params are malformed.
        """
        if not isinstance(data, dict):
            raise OutlineParseError(f"Expected notification object, got {type(data).__name__}")
        uri = data.get("uri")
        if not isinstance(uri, str) or not uri:
            raise OutlineParseError("Outline notification has no uri")
        if "outline" not in data:
            raise OutlineParseError(f"Outline notification for {uri} has no outline")
        return cls(uri=uri, outline=OutlineNode.from_dict(data["outline"]))
