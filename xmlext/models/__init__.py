"""Data models for xmlext."""

from .qname import QualifiedName

__all__ = ["QualifiedName"]
