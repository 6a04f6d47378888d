from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

class FragmentKind(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINATOR = "combinator"

    @property
    def rank(self) -> Optional[int]:
        """Position in the compound selector order; combinators have none."""
        return _RANKS.get(self)

_RANKS = {
    FragmentKind.ELEMENT: 0,
    FragmentKind.ID: 1,
    FragmentKind.CLASS: 2,
    FragmentKind.ATTRIBUTE: 3,
    FragmentKind.PSEUDO_CLASS: 4,
    FragmentKind.PSEUDO_ELEMENT: 5,
}

SINGLETON_KINDS = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})

class Fragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FragmentKind
    text: str = Field(default="")

class FragmentStore:
    """Ordered fragments of one selector plus the singleton flags derived from them."""

    def __init__(self):
        self._fragments: List[Fragment] = []
        self.has_element = False
        self.has_id = False
        self.has_pseudo_element = False

    def append(self, fragment: Fragment) -> None:
        if fragment.kind is FragmentKind.ELEMENT:
            self.has_element = True
        elif fragment.kind is FragmentKind.ID:
            self.has_id = True
        elif fragment.kind is FragmentKind.PSEUDO_ELEMENT:
            self.has_pseudo_element = True
        self._fragments.append(fragment)

    def replace(
        self,
        fragments: Iterable[Fragment],
        has_element: bool = False,
        has_id: bool = False,
        has_pseudo_element: bool = False
    ) -> None:
        self._fragments = list(fragments)
        self.has_element = has_element
        self.has_id = has_id
        self.has_pseudo_element = has_pseudo_element

    def has_singleton(self, kind: FragmentKind) -> bool:
        if kind is FragmentKind.ELEMENT:
            return self.has_element
        if kind is FragmentKind.ID:
            return self.has_id
        if kind is FragmentKind.PSEUDO_ELEMENT:
            return self.has_pseudo_element
        return False

    @property
    def last_kind(self) -> Optional[FragmentKind]:
        if not self._fragments:
            return None
        return self._fragments[-1].kind

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        return tuple(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments)
