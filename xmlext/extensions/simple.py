"""Leaf extension holding a text value and attributes."""

from typing import Any, Optional

from xmlext.extensions.base import ExtensionBase
from xmlext.io import reader


class SimpleElement(ExtensionBase):
    """An element with text content and attributes but no child elements.

    Registered with a container as a prototype; parsing yields fresh
    instances carrying the node's text and attributes.
    """

    def __init__(
        self,
        name: str,
        prefix: Optional[str] = None,
        ns: Optional[str] = None,
        value: Optional[str] = None,
        attributes: Optional[dict[str, str]] = None
    ):
        super().__init__(name, prefix, ns)
        self.value = value
        self.attributes: dict[str, str] = dict(attributes or {})

    def create_instance(self, node: Any) -> Optional["SimpleElement"]:
        if node is None:
            return SimpleElement(self.xml_name, self.xml_prefix, self.xml_namespace)

        if reader.local_name(node) != self.xml_name or \
                reader.namespace_uri(node) != self.xml_namespace:
            return None

        return SimpleElement(
            self.xml_name,
            self.xml_prefix,
            self.xml_namespace,
            value=node.text,
            attributes=dict(node.attrib),
        )

    def save(self, writer: Any) -> None:
        writer.write_start_element(self.xml_prefix, self.xml_name, self.xml_namespace)
        for key, val in self.attributes.items():
            if key.startswith("{"):
                ns, _, name = key[1:].partition("}")
                writer.write_attribute_string(name, val, ns)
            else:
                writer.write_attribute_string(key, val)
        if self.value is not None:
            writer.write_string(self.value)
        writer.write_end_element()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleElement):
            return NotImplemented
        return (self.qualified_name.same_name(other.qualified_name)
                and self.value == other.value
                and self.attributes == other.attributes)

    # Mutable and compared by value
    __hash__ = None
