"""Base types for extension elements and their factories."""

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from xmlext.core.errors import ValidationError
from xmlext.models.qname import QualifiedName


@runtime_checkable
class ExtensionElement(Protocol):
    """Anything a container can hold and persist."""

    @property
    def xml_name(self) -> str: ...

    @property
    def xml_namespace(self) -> str: ...

    @property
    def xml_prefix(self) -> Optional[str]: ...

    def save(self, writer: Any) -> None: ...


@runtime_checkable
class ExtensionElementFactory(Protocol):
    """A registered prototype that builds elements from parse-tree nodes."""

    @property
    def xml_name(self) -> str: ...

    @property
    def xml_namespace(self) -> str: ...

    @property
    def xml_prefix(self) -> Optional[str]: ...

    def create_instance(self, node: Any) -> Optional[Any]: ...


class ExtensionBase(ABC):
    """Base class for elements identified by a qualified name.

    Concrete types are both the factory (a prototype registered with a
    container) and the product of that factory.
    """

    def __init__(self, name: str, prefix: Optional[str] = None, ns: Optional[str] = None):
        if not name:
            raise ValidationError("Element name must not be empty", field="name", value=name)
        self._xml_name = name
        self._xml_prefix = prefix
        self._xml_namespace = ns or ""

    @property
    def xml_name(self) -> str:
        return self._xml_name

    @property
    def xml_prefix(self) -> Optional[str]:
        return self._xml_prefix

    @property
    def xml_namespace(self) -> str:
        return self._xml_namespace

    @property
    def qualified_name(self) -> QualifiedName:
        return QualifiedName(namespace=self._xml_namespace, local_name=self._xml_name,
                             prefix=self._xml_prefix)

    def is_named(self, local_name: str, ns: Optional[str] = None) -> bool:
        """Local name must match; `ns` of None or "" matches any namespace."""
        return self.qualified_name.matches(local_name, ns)

    @abstractmethod
    def create_instance(self, node: Any) -> Optional["ExtensionBase"]:
        """Build a populated element from `node`, or None if `node` is not ours."""

    @abstractmethod
    def save(self, writer: Any) -> None:
        """Persist this element into `writer`."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.qualified_name.clark}>"
