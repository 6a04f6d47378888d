# selector_builder/__init__.py
from .fragments import Fragment, FragmentKind, FragmentStore
from .validators import SelectorValidator
from .serializer import stringify_fragments
from .builder import SelectorBuilder
from .facade import SelectorFacade, css_selector_builder
from .parser import parse_selector
from .objects import Rectangle, get_json, from_json
from .exceptions import (
    ValidationError,
    ParseError,
    SelectorOrderError,
    OrderViolationError,
    DuplicateSingletonError,
    InvalidCombinatorError,
    InvalidSelectorError,
    InvalidHTMLError
)
from .utils import (
    validate_selector,
    is_valid_css,
    selector_to_xpath,
    get_selector_specificity,
    is_valid_html_content,
    select_elements
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SelectorBuilder",
    "SelectorFacade",
    "SelectorValidator",
    "Fragment",
    "FragmentKind",
    "FragmentStore",
    "css_selector_builder",
    "parse_selector",
    "stringify_fragments",

    # Object helpers
    "Rectangle",
    "get_json",
    "from_json",

    # Exceptions
    "ValidationError",
    "ParseError",
    "SelectorOrderError",
    "OrderViolationError",
    "DuplicateSingletonError",
    "InvalidCombinatorError",
    "InvalidSelectorError",
    "InvalidHTMLError",

    # Utility functions
    "validate_selector",
    "is_valid_css",
    "selector_to_xpath",
    "get_selector_specificity",
    "is_valid_html_content",
    "select_elements"
]
