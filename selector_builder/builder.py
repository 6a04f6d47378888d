from typing import List, Optional, Tuple
import logging

from lxml import html

from .fragments import Fragment, FragmentKind, FragmentStore
from .serializer import stringify_fragments
from .validators import SelectorValidator
from .utils import get_selector_specificity, selector_to_xpath, select_elements

logger = logging.getLogger(__name__)

class SelectorBuilder:
    """
    Fluent accumulator for a CSS selector.

    Every fragment method validates the new fragment against what has been
    built so far, appends it and returns the same builder, so calls chain:

        SelectorBuilder().element("a").attribute('href$=".png"').pseudo_class("focus")
    """

    def __init__(self, validator: Optional[SelectorValidator] = None):
        self.validator = validator or SelectorValidator()
        self._store = FragmentStore()

    def element(self, value: str) -> "SelectorBuilder":
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        return self._append(FragmentKind.CLASS, value)

    def attribute(self, value: str) -> "SelectorBuilder":
        """Add an attribute selector; ``value`` is the text between the brackets."""
        return self._append(FragmentKind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: "SelectorBuilder",
        combinator: str,
        right: "SelectorBuilder"
    ) -> "SelectorBuilder":
        """
        Replace this selector with ``left``, ``combinator`` and ``right`` joined together.

        The operands are trusted to be valid on their own; fragments are
        copied, so later changes to either operand do not leak in here.

        Args:
            left: Selector placed before the combinator
            combinator: Combinator token, e.g. ' ', '>', '+' or '~'
            right: Selector placed after the combinator

        Returns:
            This builder
        """
        self.validator.check_combinator(combinator)

        fragments = [
            *left.fragments,
            Fragment(kind=FragmentKind.COMBINATOR, text=combinator),
            *right.fragments,
        ]
        # Singleton flags are scoped to the right-hand compound: further appends
        # extend it, while singletons in the left operand stay behind the combinator
        self._store.replace(
            fragments,
            has_element=right._store.has_element,
            has_id=right._store.has_id,
            has_pseudo_element=right._store.has_pseudo_element
        )
        logger.debug(f"Combined {len(left)} + {len(right)} fragments with {combinator!r}")
        return self

    def stringify(self) -> str:
        return stringify_fragments(self._store)

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        return self._store.fragments

    def specificity(self) -> Tuple[int, int, int]:
        """Return (id_count, class_count, element_count) of the selector."""
        return get_selector_specificity(self._store)

    def to_xpath(self) -> str:
        return selector_to_xpath(self.stringify())

    def select(self, html_content: str) -> List[html.HtmlElement]:
        """Return the elements of ``html_content`` matched by this selector."""
        return select_elements(html_content, self.stringify())

    def _append(self, kind: FragmentKind, value: str) -> "SelectorBuilder":
        self.validator.check_append(self._store, kind)
        self._store.append(Fragment(kind=kind, text=value))
        logger.debug(f"Appended {kind.value} fragment {value!r}")
        return self

    def __len__(self) -> int:
        return len(self._store)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"
