"""Compact-form XML decoding.

An XML document is turned into nested dicts:

    <station valid="1"><T>5.2</T></station>

becomes

    {"station": {"_attributes": {"valid": "1"}, "T": {"_text": "5.2"}}}

Whitespace-only text between elements is ignored. Repeated sibling tags
collapse into a list of element dicts in document order.
"""
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional
from weather.errors import MalformedFeedError

TEXT_KEY = "_text"
ATTRIBUTES_KEY = "_attributes"


def xml_to_compact(xml_text: str) -> Dict[str, Any]:
    """Decode an XML document into its compact nested-dict form"""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise MalformedFeedError(f"Feed is not well-formed XML: {e}") from e

    return {root.tag: _element_to_compact(root)}


def _element_to_compact(element: ET.Element) -> Dict[str, Any]:
    node: Dict[str, Any] = {}

    if element.attrib:
        node[ATTRIBUTES_KEY] = dict(element.attrib)

    fragments: List[str] = []
    if _has_content(element.text):
        fragments.append(element.text)

    for child in element:
        _add_child(node, child.tag, _element_to_compact(child))
        if _has_content(child.tail):
            fragments.append(child.tail)

    if len(fragments) == 1:
        node[TEXT_KEY] = fragments[0]
    elif fragments:
        node[TEXT_KEY] = fragments

    return node


def _add_child(node: Dict[str, Any], tag: str, child: Dict[str, Any]) -> None:
    existing = node.get(tag)
    if existing is None:
        node[tag] = child
    elif isinstance(existing, list):
        existing.append(child)
    else:
        node[tag] = [existing, child]


def _has_content(text: Optional[str]) -> bool:
    return text is not None and text.strip() != ""


def resolve_path(document: Any, path: str) -> Optional[Any]:
    """Walk a dotted path through a compact document.

    Returns None as soon as a key is missing or a non-dict node is reached.
    """
    node = document
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node
