# noxmlserial

A small in-memory document tree made of `Node` objects, and an XML serializer for
that tree. Each node has a name, a value, attributes, an optional comment,
formatting options and child nodes.

## Building a tree

```python
from noxmlserial.node import new_root, Node, NodeType, FormatOption, RefLoc

root = new_root()
order = root.add("order", None, NodeType.OBJECT, RefLoc.LAST_CHILD)
order.set_attribute("id", "42")
order.add("item", "bolt", NodeType.VALUE, RefLoc.LAST_CHILD)
order.add("item", "nut", NodeType.VALUE, RefLoc.LAST_CHILD)
```

- `new_root()` returns an anonymous document node: it has no name and no parent.
- `Node.add(name, value, type, refloc)` creates a node and places it relative to
  the node it is called on.
- `Node.insert(node, refloc)` places an existing node. A `RefLoc` chooses where
  the node goes: `FIRST_CHILD`, `LAST_CHILD`, `BEFORE_SIBLING`, `AFTER_SIBLING`
  or `REPLACE`. The node is first taken out of the tree it was in. A
  `ValueError` is raised when a node would be placed relative to itself or
  inside its own subtree. It is also raised when a sibling position is asked
  for on a node that has no parent.
- `Node.add_child(child)` appends a node as the last child.
- `Node.unlink()` takes a node out of its parent and returns it.
- `Node.iter_children()` yields the direct children. The tree may be changed
  while you iterate.
- `Node.set_attribute(name, value)` adds an attribute, or replaces the value of
  an attribute that already has that name.
- `Node.get_attribute(name, default)` returns the value of an attribute, or
  `default` when the node has no attribute of that name.
- `Node.is_root()` is true for a node that has no parent and no name.
- `count`, `first_child`, `last_child` and `next_sibling` are read-only
  properties that describe where a node sits in the tree.

## Serializing

```python
from noxmlserial.xmlserial import as_xml_text, write_xml_file

as_xml_text(root)
# '<order id="42"><item>bolt</item><item>nut</item></order>'

write_xml_file(root, "order.xml", ccsid=1208, trim=False)
```

When the node given is a document root, only its first child element is
written. Any other node is written with its subtree. An element without a name
is written as `row`. An element with no value and no children is written in
short form, `<name/>`.

`as_xml_text(node)` returns compact XML without a declaration. It escapes
nothing and leaves out comments.

`write_xml(node, stream, ccsid, trim)` writes to a binary stream.
`write_xml_file(node, filename, ccsid, trim)` writes to a file; surrounding
blanks are stripped from the file name. Both of them:

- write an XML declaration, preceded by a byte-order mark where the encoding
  has one;
- escape `&`, `<`, `>` and `"` in values and attribute values;
- write node comments as `<!-- ... -->`;
- indent with CR LF and two spaces per level when `trim` is false. A node with
  `newline_in_attr_list` set then puts each attribute on its own line;
- write characters that the encoding cannot hold as numeric character
  references.

Passing `None` as the node writes nothing.

`encoding_for_ccsid(ccsid)` returns the declared encoding name, the codec and the
byte-order mark for a CCSID:

| CCSID | Declared encoding | Byte-order mark        |
|-------|-------------------|------------------------|
| 1252  | WINDOWS-1252      | none                   |
| 1208  | UTF-8             | EF BB BF               |
| 1200  | UTF-16            | FF FE (little endian)  |
| 819   | ISO-8859-1        | none                   |
| other | windows-1252      | none                   |

When a node's `options` include `FormatOption.CDATA`, that node's content is
wrapped in a `<![CDATA[ ... ]]>` section. Nothing inside the section is escaped
or indented.

## What it does not do

The package only builds trees in memory and writes them as XML. It does not
parse XML or JSON, it does not write JSON or CSV, and it has no command-line
program.

## Tests

```
pip install -e .[test]
pytest
```