from typing import Optional

from .builder import SelectorBuilder
from .validators import SelectorValidator

class SelectorFacade:
    """Entry points that start a new SelectorBuilder with its first fragment."""

    def __init__(self, validator: Optional[SelectorValidator] = None):
        self.validator = validator or SelectorValidator()

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(validator=self.validator)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().class_(value)

    def attribute(self, value: str) -> SelectorBuilder:
        return self._new().attribute(value)

    attr = attribute

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    def combine(
        self,
        left: SelectorBuilder,
        combinator: str,
        right: SelectorBuilder
    ) -> SelectorBuilder:
        return self._new().combine(left, combinator, right)

css_selector_builder = SelectorFacade()
