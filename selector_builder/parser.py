from typing import List, Optional
import logging

import tinycss2

from .builder import SelectorBuilder
from .exceptions import ParseError
from .validators import SelectorValidator

logger = logging.getLogger(__name__)

COMBINATOR_LITERALS = (">", "+", "~")
DESCENDANT = " "

def parse_selector(selector: str, validator: Optional[SelectorValidator] = None) -> SelectorBuilder:
    """
    Parse a selector string back into a SelectorBuilder.

    Fragments go through the regular builder methods, so the parsed selector
    obeys the same ordering rules as one built by hand.

    Args:
        selector: Selector such as 'div#main.item > a[href$=".png"]:hover'
        validator: Optional validator shared by the resulting builders

    Returns:
        Builder holding the parsed fragments

    Raises:
        ParseError: If the selector uses syntax the builder cannot express
        SelectorOrderError: If fragments appear in an invalid order
    """
    if not selector or not selector.strip():
        raise ParseError("Empty selector")

    validator = validator or SelectorValidator()
    tokens = [
        token for token in tinycss2.parse_component_value_list(selector)
        if token.type != "comment"
    ]

    compounds: List[SelectorBuilder] = [SelectorBuilder(validator)]
    combinators: List[str] = []
    pending_space = False
    pos = 0

    while pos < len(tokens):
        token = tokens[pos]

        if token.type == "whitespace":
            pending_space = True
            pos += 1
            continue

        if token.type == "literal" and token.value in COMBINATOR_LITERALS:
            if not len(compounds[-1]):
                raise ParseError(f"Combinator {token.value!r} without a selector before it")
            combinators.append(token.value)
            compounds.append(SelectorBuilder(validator))
            pending_space = False
            pos += 1
            continue

        if pending_space and len(compounds[-1]):
            combinators.append(DESCENDANT)
            compounds.append(SelectorBuilder(validator))
        pending_space = False

        pos = _parse_simple(tokens, pos, compounds[-1])

    if not len(compounds[-1]):
        raise ParseError("Selector ends with a combinator")

    result = compounds[-1]
    for left, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = SelectorBuilder(validator).combine(left, combinator, result)

    logger.debug(f"Parsed {selector!r} into {len(result)} fragment(s)")
    return result

def _parse_simple(tokens, pos: int, builder: SelectorBuilder) -> int:
    """Append the simple selector starting at ``pos`` and return the next position."""
    token = tokens[pos]

    is_type_selector = token.type == "ident" or (token.type == "literal" and token.value == "*")
    if is_type_selector and len(builder):
        # e.g. 'div*', or 'div/**/p' where the comment token is dropped
        raise ParseError(
            f"Type selector {token.serialize()!r} must start a compound selector "
            f"(line {token.source_line}, column {token.source_column})"
        )

    if token.type == "ident":
        builder.element(token.value)
        return pos + 1

    if token.type == "hash":
        builder.id(token.value)
        return pos + 1

    if token.type == "[] block":
        builder.attribute(tinycss2.serialize(token.content).strip())
        return pos + 1

    if token.type == "literal" and token.value == "*":
        builder.element("*")
        return pos + 1

    if token.type == "literal" and token.value == ".":
        name = _token_at(tokens, pos + 1)
        if name is None or name.type != "ident":
            raise ParseError(f"Expected class name at line {token.source_line}, column {token.source_column}")
        builder.class_(name.value)
        return pos + 2

    if token.type == "literal" and token.value == ":":
        following = _token_at(tokens, pos + 1)
        if following is not None and following.type == "literal" and following.value == ":":
            builder.pseudo_element(_pseudo_name(tokens, pos + 2, token))
            return pos + 3
        builder.pseudo_class(_pseudo_name(tokens, pos + 1, token))
        return pos + 2

    raise ParseError(
        f"Unexpected {token.serialize()!r} at line {token.source_line}, column {token.source_column}"
    )

def _pseudo_name(tokens, pos: int, colon) -> str:
    token = _token_at(tokens, pos)
    if token is not None and token.type == "ident":
        return token.value
    if token is not None and token.type == "function":
        return token.serialize()
    raise ParseError(
        f"Expected pseudo-class or pseudo-element name at line {colon.source_line}, column {colon.source_column}"
    )

def _token_at(tokens, pos: int):
    if pos < len(tokens):
        return tokens[pos]
    return None
