"""Name-based lookup over extension lists."""

from typing import Any, Iterable, Optional


def _matches(element: Any, local_name: str, ns: Optional[str]) -> bool:
    name = getattr(element, "xml_name", None)
    if name is None or name != local_name:
        return False
    if not ns:
        return True
    return getattr(element, "xml_namespace", None) == ns


def find_extension(extensions: Optional[Iterable[Any]], local_name: str,
                   ns: Optional[str] = None) -> Optional[Any]:
    """Return the first element named `local_name` (in `ns` unless ns is None/"").

    Elements that do not expose `xml_name` are skipped.
    """
    if extensions is None:
        return None

    for element in extensions:
        if _matches(element, local_name, ns):
            return element
    return None


def find_extensions(extensions: Optional[Iterable[Any]], local_name: str,
                    ns: Optional[str] = None, into: Optional[list] = None) -> list:
    """Collect every matching element, in order, appending to `into` if given."""
    result = [] if into is None else into
    if extensions is None:
        return result

    for element in extensions:
        if _matches(element, local_name, ns):
            result.append(element)
    return result
