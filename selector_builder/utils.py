from typing import Iterable, List, Tuple
import logging
import re

from lxml import html, etree
import cssselect

from .exceptions import InvalidSelectorError, InvalidHTMLError
from .fragments import Fragment, FragmentKind

logger = logging.getLogger(__name__)

def validate_selector(selector: str) -> None:
    """
    Check that a selector string is accepted by cssselect.

    Raises:
        InvalidSelectorError: If the selector is empty or cannot be parsed
    """
    if not selector or not isinstance(selector, str):
        raise InvalidSelectorError("Empty or invalid selector type")
    try:
        cssselect.parse(selector)
    except cssselect.SelectorError as e:
        raise InvalidSelectorError(f"Invalid CSS selector: {str(e)}") from e

def is_valid_css(selector: str) -> bool:
    """Check if a selector string is valid CSS."""
    try:
        validate_selector(selector)
        return True
    except InvalidSelectorError:
        return False

def selector_to_xpath(selector: str, prefix: str = "descendant-or-self::") -> str:
    """
    Translate a CSS selector into an XPath expression.

    Args:
        selector: CSS selector string
        prefix: XPath axis prepended to the expression

    Returns:
        XPath expression string

    Raises:
        InvalidSelectorError: If cssselect cannot parse or translate the selector
    """
    validate_selector(selector)
    try:
        return cssselect.GenericTranslator().css_to_xpath(selector, prefix=prefix)
    except (cssselect.SelectorError, cssselect.ExpressionError) as e:
        raise InvalidSelectorError(f"Cannot translate selector to XPath: {str(e)}") from e

def get_selector_specificity(fragments: Iterable[Fragment]) -> Tuple[int, int, int]:
    """
    Calculate the specificity of a built selector.
    Returns tuple of (id_count, class_count, element_count).

    Attributes and pseudo-classes count as classes, pseudo-elements as
    elements, and the universal selector counts as nothing.
    """
    id_count = 0
    class_count = 0
    element_count = 0

    for fragment in fragments:
        if fragment.kind is FragmentKind.ID:
            id_count += 1
        elif fragment.kind in (FragmentKind.CLASS, FragmentKind.ATTRIBUTE, FragmentKind.PSEUDO_CLASS):
            class_count += 1
        elif fragment.kind is FragmentKind.PSEUDO_ELEMENT:
            element_count += 1
        elif fragment.kind is FragmentKind.ELEMENT and fragment.text != "*":
            element_count += 1

    return (id_count, class_count, element_count)

def is_valid_html_content(html_content: str) -> bool:
    """
    Check if content appears to be valid HTML.
    """
    if not html_content or not isinstance(html_content, str):
        return False

    html_content = html_content.strip()
    if not html_content:
        return False

    # First check for bare text without HTML tags
    if not re.search(r'<[^>]+>', html_content):
        return False

    try:
        # Strict parse first; bytes so an XML encoding declaration is accepted
        parser = etree.HTMLParser(recover=False, encoding="utf-8")
        etree.fromstring(html_content.encode("utf-8"), parser)
        return True
    except (etree.ParserError, etree.XMLSyntaxError, ValueError):
        # If it fails, check for common HTML patterns
        has_doctype = bool(re.search(r'<!DOCTYPE\s+html', html_content, re.IGNORECASE))
        has_html_tag = bool(re.search(r'<html[\s>]', html_content, re.IGNORECASE))
        has_body_tag = bool(re.search(r'<body[\s>]', html_content, re.IGNORECASE))
        has_basic_tags = bool(re.search(r'<(?:div|p|h\d|section|article|table|ul|a)[\s>]', html_content, re.IGNORECASE))

        if not (has_doctype or has_html_tag or has_body_tag or has_basic_tags):
            return False

        # Declarations and processing instructions have no closing tag
        open_brackets = len(re.findall(r'<(?![\s/!?])', html_content))
        close_brackets = len(re.findall(r'</|/>', html_content))
        if open_brackets != close_brackets:
            return False

        # Tag opened inside another tag
        if re.search(r'<\w+[^>]*<\w+', html_content):
            return False

        return True

def select_elements(html_content: str, selector: str) -> List[html.HtmlElement]:
    """
    Find the elements of an HTML document matched by a CSS selector.

    Args:
        html_content: HTML document or fragment
        selector: CSS selector string

    Returns:
        Matching elements in document order

    Raises:
        InvalidHTMLError: If the content is not HTML
        InvalidSelectorError: If the selector cannot be translated
    """
    if not is_valid_html_content(html_content):
        raise InvalidHTMLError("Invalid HTML content")

    xpath = selector_to_xpath(selector)
    try:
        parser = html.HTMLParser(encoding="utf-8")
        tree = html.fromstring(html_content.encode("utf-8"), parser=parser)
    except (etree.ParserError, etree.XMLSyntaxError, ValueError) as e:
        raise InvalidHTMLError(f"Error parsing HTML: {str(e)}") from e

    elements = tree.xpath(xpath)
    logger.debug(f"Selector {selector!r} matched {len(elements)} element(s)")
    return elements
