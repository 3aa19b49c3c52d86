"""Tree of named nodes with values, attributes and formatting options."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Optional


class NodeType(enum.IntEnum):
    """Kind of a node in the tree."""

    UNKNOWN = 0
    OBJECT = 1
    ARRAY = 2
    PARSE_STRING = 3
    POINTER_VALUE = 4
    VALUE = 5
    ROOT = 6
    LITERAL = 16
    CLONE_OLD = 17
    CLONE = 18
    EVALUATE = 19
    MOVE = 2048
    ALLOW_PRIMITIVES = 4096


class FormatOption(enum.IntFlag):
    """Serialization options attached to a node."""

    DEFAULT = 0
    CDATA = 1


class RefLoc(enum.IntEnum):
    """Where a node goes relative to a reference node."""

    FIRST_CHILD = 1
    LAST_CHILD = 2
    BEFORE_SIBLING = 3
    AFTER_SIBLING = 4
    REPLACE = 5


@dataclass
class Attribute:
    """A name/value pair attached to a node."""

    name: str
    value: str = ""


@dataclass(eq=False)
class Node:
    """A tree node holding a name, a value, attributes and children."""

    name: Optional[str] = None
    value: Optional[str] = None
    type: NodeType = NodeType.VALUE
    comment: Optional[str] = None
    options: FormatOption = FormatOption.DEFAULT
    newline_in_attr_list: bool = False
    attributes: list[Attribute] = field(default_factory=list)
    children: list["Node"] = field(default_factory=list, repr=False)
    parent: Optional["Node"] = field(default=None, repr=False)

    @property
    def count(self) -> int:
        """Number of direct children."""
        return len(self.children)

    @property
    def first_child(self) -> Optional["Node"]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional["Node"]:
        return self.children[-1] if self.children else None

    @property
    def next_sibling(self) -> Optional["Node"]:
        if self.parent is None:
            return None
        siblings = self.parent.children
        pos = self._position()
        return siblings[pos + 1] if pos + 1 < len(siblings) else None

    def is_root(self) -> bool:
        """True for an anonymous document node: no parent and no name."""
        return self.parent is None and self.name is None

    def iter_children(self) -> Iterator["Node"]:
        """Yield the direct children in order; safe against changes during iteration."""
        yield from tuple(self.children)

    def unlink(self) -> "Node":
        """Detach this node from its parent and return it."""
        if self.parent is not None:
            del self.parent.children[self._position()]
            self.parent = None
        return self

    def add_child(self, child: "Node") -> "Node":
        """Append child as the last child of this node."""
        return self.insert(child, RefLoc.LAST_CHILD)

    def insert(self, node: "Node", refloc: RefLoc = RefLoc.LAST_CHILD) -> "Node":
        """Place node relative to this node and return it."""
        refloc = RefLoc(refloc)
        if node is self:
            raise ValueError("a node cannot be placed relative to itself")
        if refloc in (RefLoc.FIRST_CHILD, RefLoc.LAST_CHILD):
            target = self
        else:
            if self.parent is None:
                raise ValueError("node has no parent to hold a sibling")
            target = self.parent
        if node._is_ancestor_of(target):
            raise ValueError("a node cannot be placed inside its own subtree")

        node.unlink()
        if refloc is RefLoc.FIRST_CHILD:
            self.children.insert(0, node)
        elif refloc is RefLoc.LAST_CHILD:
            self.children.append(node)
        elif refloc is RefLoc.BEFORE_SIBLING:
            target.children.insert(self._position(), node)
        elif refloc is RefLoc.AFTER_SIBLING:
            target.children.insert(self._position() + 1, node)
        else:
            pos = self._position()
            target.children[pos] = node
            self.parent = None
        node.parent = target
        return node

    def add(
        self,
        name: Optional[str],
        value: Optional[str] = None,
        type: NodeType = NodeType.VALUE,
        refloc: RefLoc = RefLoc.LAST_CHILD,
    ) -> "Node":
        """Create a new node and place it relative to this node."""
        return self.insert(Node(name=name, value=value, type=NodeType(type)), refloc)

    def set_attribute(self, name: str, value: str) -> Attribute:
        """Set an attribute, replacing the value of an existing one."""
        for attr in self.attributes:
            if attr.name == name:
                attr.value = value
                return attr
        attr = Attribute(name, value)
        self.attributes.append(attr)
        return attr

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return an attribute's value, or default when it is absent."""
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return default

    def _position(self) -> int:
        assert self.parent is not None
        for pos, sibling in enumerate(self.parent.children):
            if sibling is self:
                return pos
        raise RuntimeError("node is missing from its parent's children")

    def _is_ancestor_of(self, other: Optional["Node"]) -> bool:
        while other is not None:
            if other is self:
                return True
            other = other.parent
        return False


def new_root() -> Node:
    """Return an empty anonymous document node."""
    return Node(type=NodeType.ROOT)