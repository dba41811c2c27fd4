"""In-memory JSON tree: typed nodes holding values, arrays and named object members."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator


class JsonType(IntEnum):
    """Kind of value a node holds."""

    FALSE = 0
    TRUE = 1
    NULL = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


def _truncate(value: float) -> int:
    return int(value) if math.isfinite(value) else 0


def _same_name(name: str | None, wanted: str | None) -> bool:
    if name is None or wanted is None:
        return name is wanted
    return name.lower() == wanted.lower()


@dataclass
class JsonNode:
    """One JSON value; arrays and objects keep their members in ``children``.

    Members of an object carry their key in ``name``. Key lookups ignore case.
    """

    type: JsonType = JsonType.NULL
    value_string: str | None = None
    value_int: int = 0
    value_double: float = 0.0
    name: str | None = None
    children: list[JsonNode] = field(default_factory=list)

    @staticmethod
    def null() -> JsonNode:
        return JsonNode(JsonType.NULL)

    @staticmethod
    def boolean(value: bool) -> JsonNode:
        return JsonNode(JsonType.TRUE if value else JsonType.FALSE)

    @staticmethod
    def number(value: float) -> JsonNode:
        return JsonNode(
            JsonType.NUMBER, value_double=float(value), value_int=_truncate(float(value))
        )

    @staticmethod
    def string(value: str) -> JsonNode:
        return JsonNode(JsonType.STRING, value_string=value)

    @staticmethod
    def array(items: Iterable[JsonNode | str | int | float] = ()) -> JsonNode:
        """Build an array from nodes, strings or numbers."""
        node = JsonNode(JsonType.ARRAY)
        for item in items:
            if isinstance(item, JsonNode):
                node.append(item)
            elif isinstance(item, str):
                node.append(JsonNode.string(item))
            elif isinstance(item, bool):
                node.append(JsonNode.boolean(item))
            else:
                node.append(JsonNode.number(item))
        return node

    @staticmethod
    def object() -> JsonNode:
        return JsonNode(JsonType.OBJECT)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[JsonNode]:
        return iter(self.children)

    def _position(self, index: int) -> int | None:
        index = max(index, 0)
        return index if index < len(self.children) else None

    def _find(self, name: str | None) -> int | None:
        for position, child in enumerate(self.children):
            if _same_name(child.name, name):
                return position
        return None

    def get_index(self, index: int) -> JsonNode | None:
        """Return the member at ``index``, or None past the end."""
        position = self._position(index)
        return None if position is None else self.children[position]

    def get_item(self, name: str) -> JsonNode | None:
        """Return the first member whose key matches ``name`` ignoring case."""
        position = self._find(name)
        return None if position is None else self.children[position]

    def append(self, item: JsonNode | None) -> None:
        if item is not None:
            self.children.append(item)

    def add(self, name: str, item: JsonNode | None) -> None:
        """Append ``item`` as a member named ``name``."""
        if item is None:
            return
        item.name = name
        self.children.append(item)

    def detach_index(self, index: int) -> JsonNode | None:
        """Remove and return the member at ``index``, or None past the end."""
        position = self._position(index)
        return None if position is None else self.children.pop(position)

    def detach(self, name: str) -> JsonNode | None:
        """Remove and return the member named ``name``, or None if absent."""
        position = self._find(name)
        return None if position is None else self.children.pop(position)

    def delete_index(self, index: int) -> None:
        self.detach_index(index)

    def delete(self, name: str) -> None:
        self.detach(name)

    def replace_index(self, index: int, item: JsonNode) -> None:
        """Put ``item`` in place of the member at ``index``; do nothing past the end."""
        position = self._position(index)
        if position is not None:
            self.children[position] = item

    def replace(self, name: str, item: JsonNode) -> None:
        """Put ``item`` in place of the member named ``name``; do nothing if absent."""
        position = self._find(name)
        if position is not None:
            item.name = name
            self.children[position] = item

    def duplicate(self, recurse: bool = True) -> JsonNode:
        """Copy this node; members are copied too only when ``recurse`` is true."""
        return JsonNode(
            type=self.type,
            value_string=self.value_string,
            value_int=self.value_int,
            value_double=self.value_double,
            name=self.name,
            children=[child.duplicate(True) for child in self.children] if recurse else [],
        )