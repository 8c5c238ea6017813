"""Extensions package - extension elements and their containers."""

from .base import ExtensionBase, ExtensionElement, ExtensionElementFactory
from .container import ExtensionContainer
from .simple import SimpleElement

__all__ = [
    "ExtensionBase",
    "ExtensionElement",
    "ExtensionElementFactory",
    "ExtensionContainer",
    "SimpleElement",
]
