"""Tagged-union node classes for parsed documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

KeyPath: TypeAlias = tuple[str, ...]


@dataclass(frozen=True)
class StringLeaf:
    """A string value. The only leaf kind whose content is searched."""

    value: str


@dataclass(frozen=True)
class PrimitiveLeaf:
    """A number, boolean or null. Never matches by value."""

    value: Any


@dataclass(frozen=True)
class MappingNode:
    """An object: ``(key, node)`` pairs in insertion order."""

    entries: tuple[tuple[str, Node], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SequenceNode:
    """An array: ``(index, node)`` pairs in index order.

    Indices are kept as strings so a pruned sequence still carries the
    positions its surviving items had in the original document.
    """

    entries: tuple[tuple[str, Node], ...] = field(default_factory=tuple)


Node: TypeAlias = StringLeaf | PrimitiveLeaf | MappingNode | SequenceNode
ContainerNode: TypeAlias = MappingNode | SequenceNode


def from_python(value: Any) -> Node:
    """Convert a parsed JSON value into nodes.

    Mapping keys are stringified. Tuples are treated like lists. Anything
    that is not a str, dict, list or tuple becomes a :class:`PrimitiveLeaf`.
    """
    if isinstance(value, str):
        return StringLeaf(value)
    if isinstance(value, dict):
        return MappingNode(tuple((str(k), from_python(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return SequenceNode(tuple((str(i), from_python(v)) for i, v in enumerate(value)))
    return PrimitiveLeaf(value)


def to_python(node: Node) -> Any:
    """Convert nodes back into fresh dicts, lists and scalars."""
    if isinstance(node, MappingNode):
        return {key: to_python(child) for key, child in node.entries}
    if isinstance(node, SequenceNode):
        return [to_python(child) for _, child in node.entries]
    return node.value


def is_container(node: Node) -> bool:
    return isinstance(node, (MappingNode, SequenceNode))
