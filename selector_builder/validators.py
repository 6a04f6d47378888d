import logging
from typing import Dict, FrozenSet

from .exceptions import (
    DuplicateSingletonError,
    OrderViolationError,
    InvalidCombinatorError
)
from .fragments import FragmentKind, FragmentStore, SINGLETON_KINDS

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

class SelectorValidator:
    CSS_COMBINATORS: FrozenSet[str] = frozenset({" ", ">", "+", "~"})

    # Kinds that may not directly precede the key kind
    FORBIDDEN_PREDECESSORS: Dict[FragmentKind, FrozenSet[FragmentKind]] = {
        FragmentKind.CLASS: frozenset({
            FragmentKind.ATTRIBUTE,
            FragmentKind.PSEUDO_CLASS,
            FragmentKind.PSEUDO_ELEMENT,
        }),
        FragmentKind.ATTRIBUTE: frozenset({
            FragmentKind.PSEUDO_CLASS,
            FragmentKind.PSEUDO_ELEMENT,
        }),
        FragmentKind.PSEUDO_CLASS: frozenset({FragmentKind.PSEUDO_ELEMENT}),
    }

    def __init__(self, strict_combinators: bool = False):
        self.strict_combinators = strict_combinators

    def check_append(self, store: FragmentStore, new_kind: FragmentKind) -> None:
        """
        Check that a fragment of ``new_kind`` may be appended to ``store``.

        Args:
            store: Fragments accumulated so far
            new_kind: Kind of the fragment about to be appended

        Raises:
            DuplicateSingletonError: If element, id or pseudo-element is already present
            OrderViolationError: If the fragment would break the compound selector order
        """
        if new_kind in SINGLETON_KINDS and store.has_singleton(new_kind):
            logger.debug(f"Rejected duplicate {new_kind.value} fragment")
            raise DuplicateSingletonError(DUPLICATE_MESSAGE)

        last_kind = store.last_kind
        if last_kind is None:
            return

        if self._breaks_order(last_kind, new_kind):
            logger.debug(f"Rejected {new_kind.value} fragment after {last_kind.value}")
            raise OrderViolationError(ORDER_MESSAGE)

    def check_combinator(self, combinator: str) -> None:
        """Reject unknown combinator tokens when strict_combinators is enabled."""
        if not self.strict_combinators:
            return
        if combinator not in self.CSS_COMBINATORS:
            raise InvalidCombinatorError(f"Unsupported combinator: {combinator!r}")

    def _breaks_order(self, last_kind: FragmentKind, new_kind: FragmentKind) -> bool:
        # An element always opens a compound selector
        if new_kind is FragmentKind.ELEMENT:
            return True
        if new_kind is FragmentKind.ID:
            return last_kind is not FragmentKind.ELEMENT
        return last_kind in self.FORBIDDEN_PREDECESSORS.get(new_kind, frozenset())
