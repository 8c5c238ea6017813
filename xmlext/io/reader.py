"""Parse-tree helpers over lxml elements."""

from typing import Iterator, Optional

from lxml import etree

from xmlext.config import get_config
from xmlext.core.errors import ParseError
from xmlext.core.logging import get_logger

logger = get_logger("reader")

_STRICT_XML_PARSER = etree.XMLParser(
    ns_clean=True,
    recover=False,
    collect_ids=False,
    resolve_entities=False,
)
_RECOVER_XML_PARSER = etree.XMLParser(
    ns_clean=True,
    recover=True,
    collect_ids=False,
    resolve_entities=False,
)


def parse_xml(content: str | bytes, recover: Optional[bool] = None) -> etree._Element:
    """Parse a document and return its root element.

    Args:
        content: XML text or bytes
        recover: Retry with the recovering parser on syntax errors.
            Defaults to the `XMLEXT_PARSE_RECOVER` setting.

    Raises:
        ParseError: if the content is empty or not well-formed
    """
    if recover is None:
        recover = get_config().parse.recover

    if isinstance(content, str):
        content = content.encode("utf-8")

    if not content.strip():
        raise ParseError("Cannot parse an empty document")

    try:
        root = etree.fromstring(content, parser=_STRICT_XML_PARSER)
    except etree.XMLSyntaxError as e:
        if not recover:
            raise ParseError(f"Failed to parse XML: {e.msg}", line=e.lineno, cause=e) from e
        logger.warning("Strict parse failed, retrying with recovering parser",
                       component="reader", error=str(e))
        try:
            root = etree.fromstring(content, parser=_RECOVER_XML_PARSER)
        except etree.XMLSyntaxError as e2:
            raise ParseError(f"Failed to parse XML: {e2.msg}", line=e2.lineno, cause=e2) from e2

    if root is None:
        raise ParseError("Document has no root element")

    return root


def is_element(node) -> bool:
    """True for element nodes; comments, PIs and entities have a non-string tag."""
    return isinstance(getattr(node, "tag", None), str)


def local_name(node) -> str:
    return etree.QName(node).localname


def namespace_uri(node) -> str:
    """Namespace URI of `node`, empty string when it has none."""
    return etree.QName(node).namespace or ""


def child_elements(node) -> Iterator[etree._Element]:
    """Yield the element children of `node` in document order."""
    for child in node:
        if is_element(child):
            yield child
