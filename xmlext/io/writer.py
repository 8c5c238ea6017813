"""Incremental XML writer that builds an lxml tree."""

from typing import Optional

from lxml import etree

from xmlext.config import get_config
from xmlext.core.errors import WriterError


def _tag(local_name: str, ns: Optional[str]) -> str:
    return etree.QName(ns, local_name).text if ns else local_name


def _without_default_namespace(element, parent=None):
    """Copy `element`, moving default namespace bindings onto generated prefixes.

    lxml never writes xmlns="", so an unqualified element below a default
    namespace would otherwise be read back inside that namespace.
    """
    inherited = parent.nsmap if parent is not None else {}
    nsmap = {prefix: uri for prefix, uri in element.nsmap.items()
             if prefix is not None and inherited.get(prefix) != uri}

    if parent is None:
        copy = etree.Element(element.tag, attrib=dict(element.attrib), nsmap=nsmap)
    else:
        copy = etree.SubElement(parent, element.tag, attrib=dict(element.attrib), nsmap=nsmap)
    copy.text = element.text
    copy.tail = element.tail

    for child in element:
        _without_default_namespace(child, copy)
    return copy


class XmlWriter:
    """Stream-style writer: start element, attributes, text, end element.

    Elements are collected into a single lxml tree which is serialized by
    `to_bytes` / `to_string` once every started element has been ended.
    """

    def __init__(
        self,
        pretty_print: Optional[bool] = None,
        xml_declaration: Optional[bool] = None,
        encoding: Optional[str] = None
    ):
        settings = get_config().writer
        self.pretty_print = settings.pretty_print if pretty_print is None else pretty_print
        self.xml_declaration = settings.xml_declaration if xml_declaration is None else xml_declaration
        self.encoding = encoding or settings.encoding
        self._root: Optional[etree._Element] = None
        self._stack: list[etree._Element] = []
        self._default_shadowed = False

    @property
    def root(self) -> Optional[etree._Element]:
        """The element written first, or None before anything was written."""
        return self._root

    @property
    def depth(self) -> int:
        """Number of started elements not yet ended."""
        return len(self._stack)

    def write_start_element(self, prefix: Optional[str], local_name: str, ns: Optional[str] = None) -> None:
        """Open a new element as a child of the current one."""
        nsmap = None
        if ns:
            nsmap = {prefix or None: ns}

        if self._stack:
            parent = self._stack[-1]
            if not ns and parent.nsmap.get(None):
                self._default_shadowed = True
            if nsmap and parent.nsmap.get(prefix or None) == ns:
                nsmap = None
            element = etree.SubElement(parent, _tag(local_name, ns), nsmap=nsmap)
        else:
            if self._root is not None:
                raise WriterError("Document already has a root element", open_elements=0)
            element = etree.Element(_tag(local_name, ns), nsmap=nsmap)
            self._root = element

        self._stack.append(element)

    def write_attribute_string(self, name: str, value: str, ns: Optional[str] = None) -> None:
        """Set an attribute on the current element."""
        if not self._stack:
            raise WriterError(f"No open element to receive attribute '{name}'", open_elements=0)
        self._stack[-1].set(_tag(name, ns), value)

    def write_string(self, text: str) -> None:
        """Append character data at the current position."""
        if not self._stack:
            raise WriterError("No open element to receive text", open_elements=0)

        current = self._stack[-1]
        if len(current):
            last = current[-1]
            last.tail = (last.tail or "") + text
        else:
            current.text = (current.text or "") + text

    def write_end_element(self) -> None:
        """Close the current element."""
        if not self._stack:
            raise WriterError("write_end_element called with no open element", open_elements=0)
        self._stack.pop()

    def to_bytes(self) -> bytes:
        """Serialize the finished document."""
        if self._root is None:
            raise WriterError("Nothing has been written")
        if self._stack:
            raise WriterError("Document has unclosed elements", open_elements=len(self._stack))

        root = self._root
        if self._default_shadowed:
            root = _without_default_namespace(root)

        return etree.tostring(
            root,
            pretty_print=self.pretty_print,
            xml_declaration=self.xml_declaration,
            encoding=self.encoding,
        )

    def to_string(self) -> str:
        return self.to_bytes().decode(self.encoding)
