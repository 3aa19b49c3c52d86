import io
import xml.etree.ElementTree as ET

import pytest

from noxmlserial.node import FormatOption, Node, new_root
from noxmlserial.xmlserial import (
    as_xml_text,
    encoding_for_ccsid,
    write_xml,
    write_xml_file,
)


def _sample() -> Node:
    top = Node(name="order")
    top.set_attribute("id", "7")
    top.add("customer", "Ann")
    item = top.add("item")
    item.set_attribute("sku", "x1")
    item.add("qty", "2")
    top.add("empty")
    return top


def _shape(elem):
    return (
        elem.tag,
        dict(elem.attrib),
        (elem.text or "").strip(),
        [_shape(child) for child in elem],
    )


def _body(data: bytes, codec: str, bom: bytes) -> str:
    assert data.startswith(bom)
    text = data[len(bom):].decode(codec)
    return text.split("?>", 1)[1]


def test_as_xml_text_round_trips_structure():
    top = _sample()
    parsed = ET.fromstring(as_xml_text(top))
    assert parsed.tag == "order"
    assert parsed.attrib == {"id": "7"}
    assert [child.tag for child in parsed] == ["customer", "item", "empty"]
    assert parsed.find("customer").text == "Ann"
    assert parsed.find("item").attrib == {"sku": "x1"}
    assert parsed.find("item/qty").text == "2"
    assert list(parsed.find("empty")) == []


def test_none_gives_empty_text():
    assert as_xml_text(None) == ""


def test_root_document_serializes_only_first_element():
    root = new_root()
    first = root.add("first", "1")
    root.add("second", "2")
    assert as_xml_text(root) == as_xml_text(first)
    assert "second" not in as_xml_text(root)


def test_selected_node_serializes_without_siblings():
    top = _sample()
    item = top.children[1]
    text = as_xml_text(item)
    assert text.startswith("<item")
    assert "customer" not in text


def test_unnamed_node_uses_row():
    parent = Node(name="list")
    parent.add(None, "v")
    text = as_xml_text(parent)
    assert "<row>" in text and "</row>" in text


def test_empty_node_uses_short_form():
    assert as_xml_text(Node(name="e")).endswith("/>")


def test_text_mode_does_not_escape():
    node = Node(name="v", value="a<b&c")
    assert "a<b&c" in as_xml_text(node)


def test_cdata_wraps_children_in_text():
    outer = Node(name="a", options=FormatOption.CDATA)
    inner = outer.add("b", "x")
    text = as_xml_text(outer)
    assert "<![CDATA[" in text and "]]>" in text
    assert ET.fromstring(text).text == as_xml_text(inner)


def test_write_xml_utf8_header():
    buf = io.BytesIO()
    write_xml(Node(name="a"), buf, 1208)
    assert buf.getvalue().startswith(
        b'\xef\xbb\xbf<?xml version="1.0" encoding="UTF-8" ?>'
    )


def test_write_xml_trimmed_matches_text():
    top = _sample()
    buf = io.BytesIO()
    write_xml(top, buf, 1208, trim=True)
    body = _body(buf.getvalue(), "utf-8", b"\xef\xbb\xbf")
    assert "\r\n" not in body
    assert _shape(ET.fromstring(body)) == _shape(ET.fromstring(as_xml_text(top)))


def test_write_xml_pretty_indents():
    top = _sample()
    buf = io.BytesIO()
    write_xml(top, buf, 1208, trim=False)
    body = _body(buf.getvalue(), "utf-8", b"\xef\xbb\xbf")
    assert body.startswith("\r\n<order")
    assert "\r\n  <customer>" in body
    assert "\r\n    <qty>" in body
    assert _shape(ET.fromstring(body)) == _shape(ET.fromstring(as_xml_text(top)))


def test_write_xml_escapes_values_and_attributes():
    node = Node(name="v", value="a<b&c")
    node.set_attribute("q", 'say "hi"')
    buf = io.BytesIO()
    write_xml(node, buf, 1208)
    parsed = ET.fromstring(_body(buf.getvalue(), "utf-8", b"\xef\xbb\xbf"))
    assert parsed.text == "a<b&c"
    assert parsed.attrib["q"] == 'say "hi"'


def test_write_xml_cdata_not_escaped():
    outer = Node(name="a", options=FormatOption.CDATA)
    outer.add("b", "x&y")
    buf = io.BytesIO()
    write_xml(outer, buf, 1208, trim=False)
    body = _body(buf.getvalue(), "utf-8", b"\xef\xbb\xbf")
    parsed = ET.fromstring(body)
    assert parsed.text == as_xml_text(outer.children[0])


def test_comments_only_in_documents():
    node = Node(name="a", value="1", comment="note")
    buf = io.BytesIO()
    write_xml(node, buf, 1208)
    assert b"<!--note-->" in buf.getvalue()
    assert "<!--" not in as_xml_text(node)


def test_newline_in_attribute_list_when_pretty():
    node = Node(name="a", newline_in_attr_list=True)
    node.set_attribute("k", "v")
    buf = io.BytesIO()
    write_xml(node, buf, 1208, trim=False)
    body = _body(buf.getvalue(), "utf-8", b"\xef\xbb\xbf")
    assert '\r\n  k="v"' in body
    assert ET.fromstring(body).attrib == {"k": "v"}


@pytest.mark.parametrize(
    "ccsid, declared, bom",
    [
        (1252, "WINDOWS-1252", b""),
        (1208, "UTF-8", b"\xef\xbb\xbf"),
        (1200, "UTF-16", b"\xff\xfe"),
        (819, "ISO-8859-1", b""),
        (37, "windows-1252", b""),
    ],
)
def test_encoding_for_ccsid(ccsid, declared, bom):
    name, _codec, signature = encoding_for_ccsid(ccsid)
    assert name == declared
    assert signature == bom


@pytest.mark.parametrize("ccsid", [1252, 1208, 1200, 819, 37])
def test_write_xml_each_encoding_round_trips(ccsid):
    node = Node(name="word", value="caf\u00e9")
    buf = io.BytesIO()
    write_xml(node, buf, ccsid)
    declared, codec, bom = encoding_for_ccsid(ccsid)
    body = _body(buf.getvalue(), codec, bom)
    assert ET.fromstring(body).text == "caf\u00e9"
    assert f'encoding="{declared}"' in buf.getvalue()[len(bom):].decode(codec)


def test_write_xml_file(tmp_path):
    target = tmp_path / "out.xml"
    top = _sample()
    write_xml_file(top, str(target), 1208)
    body = _body(target.read_bytes(), "utf-8", b"\xef\xbb\xbf")
    assert _shape(ET.fromstring(body)) == _shape(ET.fromstring(as_xml_text(top)))


def test_write_xml_file_none_creates_nothing(tmp_path):
    target = tmp_path / "none.xml"
    write_xml_file(None, str(target), 1208)
    assert not target.exists()


def test_write_xml_none_writes_nothing():
    buf = io.BytesIO()
    write_xml(None, buf, 1208)
    assert buf.getvalue() == b""