"""XML serialization of node trees to text, streams and files."""

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional

from .node import FormatOption, Node

_DEFAULT_NODE_NAME = "row"
_CDATA_BEGIN = "<![CDATA["
_CDATA_END = "]]>"

_ENCODINGS = {
    1252: ("WINDOWS-1252", "cp1252", b""),
    1208: ("UTF-8", "utf-8", b"\xef\xbb\xbf"),
    1200: ("UTF-16", "utf-16-le", b"\xff\xfe"),
    819: ("ISO-8859-1", "latin-1", b""),
}
_DEFAULT_ENCODING = ("windows-1252", "cp1252", b"")

_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})


def encoding_for_ccsid(ccsid: int) -> tuple[str, str, bytes]:
    """Return (declared encoding name, codec name, byte-order signature) for a CCSID."""
    return _ENCODINGS.get(ccsid, _DEFAULT_ENCODING)


def _escape(text: str) -> str:
    return text.translate(_ESCAPES)


def _element(
    node: Node,
    level: int,
    cdata_level: int,
    *,
    pretty: bool,
    escape: bool,
    comments: bool,
) -> Iterator[str]:
    """Yield the markup of one element and its subtree."""
    if node.options & FormatOption.CDATA and cdata_level == 0:
        cdata_level = level
    in_cdata = cdata_level != 0
    starts_cdata = cdata_level == level
    do_escape = escape and not in_cdata
    indent = pretty and not in_cdata
    tab = "\r\n" + "  " * (level - 1)
    name = node.name if node.name else _DEFAULT_NODE_NAME

    def text(value: str) -> str:
        return _escape(value) if do_escape else value

    if comments and node.comment:
        if indent:
            yield tab
        yield f"<!--{node.comment}-->"

    if indent:
        yield tab
    yield f"<{name}"

    for attr in node.attributes:
        if node.newline_in_attr_list and comments:
            if indent:
                yield tab
            yield "  "
        else:
            yield " "
        yield f'{attr.name}="{text(attr.value or "")}"'

    has_value = bool(node.value)
    has_children = bool(node.children)

    if has_value:
        yield ">"
        if starts_cdata:
            yield _CDATA_BEGIN
        yield text(node.value)

    if has_children:
        if not has_value:
            yield ">"
            if starts_cdata:
                yield _CDATA_BEGIN
        for child in node.children:
            yield from _element(
                child,
                level + 1,
                cdata_level,
                pretty=pretty,
                escape=escape,
                comments=comments,
            )

    if not has_value and not has_children:
        if node.newline_in_attr_list and indent:
            yield tab
        yield "/>"
    else:
        if has_children and indent:
            yield tab
        if starts_cdata:
            yield _CDATA_END
        yield f"</{name}>"


def _document_element(node: Node) -> Optional[Node]:
    """The single element that serialization covers for a given node."""
    if node.is_root():
        return node.first_child
    return node


def as_xml_text(node: Optional[Node]) -> str:
    """Render a node as compact XML text, without escaping or comments."""
    if node is None:
        return ""
    target = _document_element(node)
    if target is None:
        return ""
    return "".join(
        _element(target, 1, 0, pretty=False, escape=False, comments=False)
    )


def write_xml(
    node: Optional[Node],
    stream: BinaryIO,
    ccsid: int = 1208,
    trim: bool = True,
) -> None:
    """Write a node as an XML document, with declaration, to a binary stream."""
    if node is None:
        return
    declared, codec, signature = encoding_for_ccsid(ccsid)
    parts = [f'<?xml version="1.0" encoding="{declared}" ?>']
    target = _document_element(node)
    if target is not None:
        parts.extend(
            _element(target, 1, 0, pretty=not trim, escape=True, comments=True)
        )
    stream.write(signature)
    stream.write("".join(parts).encode(codec, errors="xmlcharrefreplace"))


def write_xml_file(
    node: Optional[Node],
    filename: str,
    ccsid: int = 1208,
    trim: bool = True,
) -> None:
    """Write a node as an XML document to the named file."""
    if node is None:
        return
    with open(filename.strip(), "wb") as stream:
        write_xml(node, stream, ccsid, trim)