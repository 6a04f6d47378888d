from typing import Iterable

from .fragments import Fragment, FragmentKind

_TEMPLATES = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
    FragmentKind.COMBINATOR: " {} ",
}

def render_fragment(fragment: Fragment) -> str:
    template = _TEMPLATES.get(fragment.kind)
    if template is None:
        return ""
    return template.format(fragment.text)

def stringify_fragments(fragments: Iterable[Fragment]) -> str:
    """Join fragments into a selector string; combinators carry their own padding."""
    return "".join(render_fragment(fragment) for fragment in fragments)
