"""Containers holding an open-ended set of extension elements."""

from typing import Any, Iterable, Optional

from xmlext.core.errors import ValidationError
from xmlext.core.logging import get_logger
from xmlext.extensions.base import ExtensionBase, ExtensionElementFactory
from xmlext.extensions import utilities
from xmlext.io import reader

logger = get_logger("container")


class ExtensionContainer(ExtensionBase):
    """An element whose children are extensions resolved through registered factories.

    A schema type builds one container as a prototype and registers a
    factory for each child element it understands. `create_instance` then
    produces populated copies from parse-tree nodes; children no factory
    claims are dropped.

    Not thread-safe; callers sharing an instance must serialize access.
    """

    def __init__(
        self,
        name: str,
        prefix: Optional[str] = None,
        ns: Optional[str] = None,
        factories: Optional[Iterable[ExtensionElementFactory]] = None
    ):
        super().__init__(name, prefix, ns)
        self._extensions: list[Any] = []
        self._extension_factories: list[ExtensionElementFactory] = []
        for factory in factories or ():
            self.register_factory(factory)

    @property
    def extension_elements(self) -> list[Any]:
        """The live list of extensions; mutating it mutates the container."""
        return self._extensions

    @extension_elements.setter
    def extension_elements(self, value: list[Any]) -> None:
        self._extensions = value if value is not None else []

    @property
    def extension_factories(self) -> list[ExtensionElementFactory]:
        """Registered factories, consulted in order during `create_instance`."""
        return self._extension_factories

    @extension_factories.setter
    def extension_factories(self, value: list[ExtensionElementFactory]) -> None:
        self._extension_factories = value if value is not None else []

    def register_factory(self, factory: ExtensionElementFactory) -> "ExtensionContainer":
        """Append a factory; earlier registrations win for the same name."""
        if not isinstance(factory, ExtensionElementFactory):
            raise ValidationError(
                "Factory must expose xml_name, xml_namespace, xml_prefix and create_instance",
                field="factory",
                value=factory,
            )
        self._extension_factories.append(factory)
        return self

    def find_extension(self, local_name: str, ns: Optional[str] = None) -> Optional[Any]:
        """First extension named `local_name`; `ns` of None or "" ignores the namespace."""
        return utilities.find_extension(self._extensions, local_name, ns)

    def find_extensions(self, local_name: str, ns: Optional[str] = None) -> list[Any]:
        """All matching extensions in their current order."""
        return utilities.find_extensions(self._extensions, local_name, ns)

    def delete_extensions(self, local_name: str, ns: Optional[str] = None) -> int:
        """Remove every matching extension and return how many were removed.

        Removal is by identity; the remaining extensions keep their order.
        """
        matched = self.find_extensions(local_name, ns)
        if matched:
            doomed = {id(element) for element in matched}
            self._extensions[:] = [e for e in self._extensions if id(e) not in doomed]
        return len(matched)

    def replace_extension(self, local_name: str, ns: Optional[str], new_element: Any) -> None:
        """Delete all matches, then append `new_element` at the end of the list."""
        if new_element is None:
            raise ValidationError("Cannot store None as an extension", field="new_element")
        self.delete_extensions(local_name, ns)
        self._extensions.append(new_element)

    def _copy_shell(self) -> "ExtensionContainer":
        """Copy every instance field into a new instance with no extensions.

        Fields are copied shallowly, so factories stay shared with the
        prototype. Subclasses owning mutable state that must not be shared
        override this, call super() and duplicate that state.
        """
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._extension_factories = self._extension_factories
        clone._extensions = []
        return clone

    def create_instance(self, node: Any = None) -> Optional["ExtensionContainer"]:
        """Build a populated container from `node`.

        Returns None when `node` carries a different qualified name.
        """
        logger.instance_created(self.xml_name, self.xml_namespace)

        if node is not None:
            if reader.local_name(node) != self.xml_name or \
                    reader.namespace_uri(node) != self.xml_namespace:
                return None

        container = self._copy_shell()
        if node is None:
            return container

        factories = tuple(self._extension_factories)
        for child in reader.child_elements(node):
            child_name = reader.local_name(child)
            child_ns = reader.namespace_uri(child)

            for factory in factories:
                if factory.xml_namespace == child_ns and factory.xml_name == child_name:
                    logger.extension_added(factory.xml_name, child_ns)
                    instance = factory.create_instance(child)
                    if instance is not None:
                        container._extensions.append(instance)
                    break
            else:
                logger.extension_skipped(child_name, child_ns)

        return container

    def save(self, writer: Any) -> None:
        """Write this element and, in order, every extension it holds."""
        writer.write_start_element(self.xml_prefix, self.xml_name, self.xml_namespace)
        for element in self._extensions:
            element.save(writer)
        writer.write_end_element()
