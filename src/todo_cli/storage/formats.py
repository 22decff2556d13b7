# src/todo_cli/storage/formats.py

"""
Serialization codec.

Turns a Document into text in one of the supported formats and back:
- TOML via tomllib / tomli_w (the default, used for the live files)
- JSON via json
- YAML via PyYAML (safe_load / safe_dump only)
- XML via xml.etree.ElementTree, with `type` attributes on every node

Library errors never escape: they are re-raised as EncodeError / DecodeError.
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
import xml.etree.ElementTree as ET
from enum import StrEnum
from typing import Any, TypeVar

import tomli_w
import yaml

from ..core.errors import DecodeError, EncodeError
from ..core.ports import Document, DocumentData

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Document)


class Format(StrEnum):
    TOML = "toml"
    JSON = "json"
    YAML = "yaml"
    XML = "xml"

    @classmethod
    def parse(cls, raw: str) -> Format:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            names = ", ".join(f.value for f in cls)
            raise ValueError(f"unknown format {raw!r} (expected one of: {names})") from None


DEFAULT_FORMAT = Format.TOML


# ---- XML ----

_XML_NAME = re.compile(r"^[A-Za-z_][\w.-]*$")
# Characters XML 1.0 cannot carry at all, even escaped.
_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _singular(key: str) -> str:
    if key == "tasks":
        return "task"
    return "item"


def _xml_node(tag: str, value: Any) -> ET.Element:
    if not _XML_NAME.match(tag) or tag.lower().startswith("xml"):
        raise EncodeError(f"`{tag}` is not a valid XML element name")

    node = ET.Element(tag)
    if value is None:
        node.set("type", "null")
    elif isinstance(value, bool):
        node.set("type", "bool")
        node.text = "true" if value else "false"
    elif isinstance(value, int):
        node.set("type", "int")
        node.text = str(value)
    elif isinstance(value, str):
        if _XML_ILLEGAL.search(value):
            raise EncodeError(f"value of `{tag}` contains characters XML cannot represent")
        node.set("type", "str")
        node.text = value
    elif isinstance(value, list):
        node.set("type", "list")
        child_tag = _singular(tag)
        for item in value:
            node.append(_xml_node(child_tag, item))
    elif isinstance(value, dict):
        node.set("type", "dict")
        for key, item in value.items():
            node.append(_xml_node(str(key), item))
    else:
        raise EncodeError(f"unsupported type {type(value).__name__} for `{tag}`")
    return node


def _xml_value(node: ET.Element) -> Any:
    kind = node.get("type")
    children = list(node)

    if kind == "null":
        return None
    if kind == "bool":
        text = (node.text or "").strip().lower()
        if text not in ("true", "false"):
            raise DecodeError(f"invalid boolean in <{node.tag}>: {node.text!r}")
        return text == "true"
    if kind == "int":
        try:
            return int((node.text or "").strip())
        except ValueError:
            raise DecodeError(f"invalid integer in <{node.tag}>: {node.text!r}") from None
    if kind == "str":
        return node.text or ""
    if kind == "list":
        return [_xml_value(child) for child in children]
    if kind not in (None, "dict"):
        raise DecodeError(f"unknown type attribute {kind!r} on <{node.tag}>")

    if kind is None and not children:
        # Un-typed leaf: hand the text over and let the document coerce it.
        return node.text or ""

    # Repeated un-typed children under one parent read as a list.
    tags = [child.tag for child in children]
    if kind is None and len(children) > 1 and len(set(tags)) == 1:
        return [_xml_value(child) for child in children]

    out: dict[str, Any] = {}
    for child in children:
        if child.tag in out:
            raise DecodeError(f"duplicate element <{child.tag}> in <{node.tag}>")
        out[child.tag] = _xml_value(child)
    return out


def _dump_xml(data: DocumentData, root: str) -> str:
    node = _xml_node(root, data)
    ET.indent(node)
    # A raw CR would be read back as LF; only text nodes can contain one.
    body = ET.tostring(node, encoding="unicode").replace("\r", "&#13;")
    return XML_DECLARATION + body + "\n"


def _load_xml(text: str) -> Any:
    root = ET.fromstring(text)
    value = _xml_value(root)
    # <todo/> with nothing inside is an empty document.
    if value == "":
        return {}
    return value


# ---- public API ----


def dumps(data: DocumentData, fmt: Format, *, root: str = "document") -> str:
    """Serialize a plain data tree."""
    try:
        if fmt is Format.TOML:
            return tomli_w.dumps(data)
        if fmt is Format.JSON:
            return json.dumps(data, ensure_ascii=False, indent=2) + "\n"
        if fmt is Format.YAML:
            return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
        if fmt is Format.XML:
            return _dump_xml(data, root)
    except EncodeError:
        raise
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        raise EncodeError(f"Serializing {fmt.value.upper()}, {exc}") from exc
    raise EncodeError(f"unsupported format {fmt!r}")


def loads(text: str, fmt: Format) -> DocumentData:
    """Parse text into a plain data tree; the top level must be a mapping."""
    try:
        if fmt is Format.TOML:
            data: Any = tomllib.loads(text)
        elif fmt is Format.JSON:
            data = json.loads(text)
        elif fmt is Format.YAML:
            data = yaml.safe_load(text)
            if data is None:
                data = {}
        elif fmt is Format.XML:
            data = _load_xml(text)
        else:
            raise DecodeError(f"unsupported format {fmt!r}")
    except DecodeError:
        raise
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError, ET.ParseError) as exc:
        raise DecodeError(f"Deserializing {fmt.value.upper()}, {exc}") from exc

    if not isinstance(data, dict):
        raise DecodeError(f"Deserializing {fmt.value.upper()}, expected a mapping at the top level")
    return data


def encode(value: Document, fmt: Format) -> str:
    text = dumps(value.to_data(), fmt, root=value.document_name)
    logger.debug("Encoded %s as %s (%d chars)", type(value).__name__, fmt.value, len(text))
    return text


def decode(text: str, fmt: Format, kind: type[D]) -> D:
    data = loads(text, fmt)
    try:
        value = kind.from_data(data)
    except DecodeError as exc:
        raise DecodeError(f"Deserializing {fmt.value.upper()}, {exc.message}") from exc
    logger.debug("Decoded %s from %s", kind.__name__, fmt.value)
    return value
