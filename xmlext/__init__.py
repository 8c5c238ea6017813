"""xmlext - extension containers for XML-backed protocol data."""

from .extensions import ExtensionBase, ExtensionContainer, SimpleElement
from .io import XmlWriter, parse_xml
from .models import QualifiedName

__version__ = "0.1.0"

__all__ = [
    "ExtensionBase",
    "ExtensionContainer",
    "SimpleElement",
    "XmlWriter",
    "parse_xml",
    "QualifiedName",
]
