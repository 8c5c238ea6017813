"""XML reading and writing over lxml."""

from .reader import parse_xml, local_name, namespace_uri, child_elements
from .writer import XmlWriter

__all__ = ["parse_xml", "local_name", "namespace_uri", "child_elements", "XmlWriter"]
