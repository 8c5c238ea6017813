"""Qualified name data model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QualifiedName(BaseModel):
    """An XML element name: namespace URI, local name and optional prefix.

    Two names denote the same element type when namespace and local name
    agree; the prefix only matters when writing.
    """
    model_config = ConfigDict(frozen=True)

    namespace: str = Field(default="", description="Namespace URI, empty for none")
    local_name: str = Field(..., description="Local part of the element name")
    prefix: str | None = Field(default=None, description="Preferred prefix when serializing")

    @field_validator("local_name")
    @classmethod
    def _local_name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("local_name must not be empty")
        return value

    @field_validator("namespace", mode="before")
    @classmethod
    def _namespace_default(cls, value):
        return value or ""

    @property
    def clark(self) -> str:
        """Name in `{namespace}local` form, as lxml spells tags."""
        if self.namespace:
            return f"{{{self.namespace}}}{self.local_name}"
        return self.local_name

    def same_name(self, other: "QualifiedName") -> bool:
        """Compare namespace and local name, ignoring the prefix."""
        return self.namespace == other.namespace and self.local_name == other.local_name

    def matches(self, local_name: str, ns: str | None = None) -> bool:
        """Relaxed match: `ns` of None or "" means any namespace."""
        if self.local_name != local_name:
            return False
        return not ns or self.namespace == ns

    @classmethod
    def from_clark(cls, tag: str, prefix: str | None = None) -> "QualifiedName":
        """Build from `{namespace}local` or a bare local name."""
        if tag.startswith("{"):
            namespace, _, local_name = tag[1:].partition("}")
            return cls(namespace=namespace, local_name=local_name, prefix=prefix)
        return cls(local_name=tag, prefix=prefix)

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.prefix}:{self.local_name}"
        return self.local_name
