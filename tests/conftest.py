"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Add project root to Python path so 'xmlext' is findable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import os

import pytest

NS_ROOT = "http://example.com/schemas/root"
NS_A = "http://example.com/schemas/a"
NS_B = "http://example.com/schemas/b"
NS_C = "http://example.com/schemas/c"


class Opaque:
    """An extension with no qualified name; equal to everything."""

    def __init__(self):
        self.saved = 0

    def __eq__(self, other):
        return True

    __hash__ = object.__hash__

    def save(self, writer):
        self.saved += 1


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from XMLEXT_* variables and the cached global config."""
    from xmlext.config import reset_config

    for key in list(os.environ):
        if key.startswith("XMLEXT_"):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def foo_factory():
    from xmlext.extensions.simple import SimpleElement
    return SimpleElement("foo", "a", NS_A)


@pytest.fixture
def bar_factory():
    from xmlext.extensions.simple import SimpleElement
    return SimpleElement("bar", "b", NS_B)


@pytest.fixture
def prototype(foo_factory, bar_factory):
    """A container prototype that understands a:foo and b:bar."""
    from xmlext.extensions.container import ExtensionContainer
    return ExtensionContainer("item", "r", NS_ROOT, factories=[foo_factory, bar_factory])


@pytest.fixture
def sample_document() -> str:
    """Document with a known, an unknown and another known child."""
    return f'''<r:item xmlns:r="{NS_ROOT}" xmlns:a="{NS_A}" xmlns:b="{NS_B}" xmlns:c="{NS_C}">
  <a:foo kind="first">one</a:foo>
  <!-- a comment between children -->
  <c:baz>dropped</c:baz>
  <?render hint?>
  <b:bar>two</b:bar>
</r:item>'''


@pytest.fixture
def opaque():
    return Opaque()
