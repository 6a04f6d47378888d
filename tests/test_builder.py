import itertools

import pytest
from selector_builder import (
    SelectorBuilder,
    FragmentKind,
    css_selector_builder,
    DuplicateSingletonError,
    OrderViolationError,
    InvalidCombinatorError,
    InvalidSelectorError
)

def test_id_and_classes(builder):
    selector = builder.id("main").class_("container").class_("editable")
    assert selector.stringify() == "#main.container.editable"

def test_element_attribute_pseudo_class(builder):
    selector = builder.element("a").attribute('href$=".png"').pseudo_class("focus")
    assert selector.stringify() == 'a[href$=".png"]:focus'

def test_attr_alias(builder):
    assert builder.attr("disabled").stringify() == "[disabled]"
    assert builder.element("input").attr("disabled").stringify() == "input[disabled]"

def test_every_fragment_kind(builder):
    selector = (
        builder.element("li")
        .id("first")
        .class_("item")
        .attribute("data-x")
        .pseudo_class("hover")
        .pseudo_element("before")
    )
    assert selector.stringify() == "li#first.item[data-x]:hover::before"

def test_facade_starts_with_any_kind():
    test_cases = [
        (css_selector_builder.element("p"), "p"),
        (css_selector_builder.id("nav"), "#nav"),
        (css_selector_builder.class_("btn"), ".btn"),
        (css_selector_builder.attribute("type=text"), "[type=text]"),
        (css_selector_builder.pseudo_class("checked"), ":checked"),
        (css_selector_builder.pseudo_element("after"), "::after"),
    ]

    for selector, expected in test_cases:
        assert isinstance(selector, SelectorBuilder)
        assert selector.stringify() == expected

def test_chaining_returns_same_builder(builder):
    selector = builder.element("div")
    assert selector.class_("a") is selector
    assert selector.pseudo_class("hover") is selector

def test_facade_returns_fresh_builders(builder):
    first = builder.element("div")
    second = builder.element("span")
    assert first is not second
    assert first.stringify() == "div"

def test_valid_orderings_never_raise():
    optional = [FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT]
    repeatable = [FragmentKind.CLASS, FragmentKind.ATTRIBUTE, FragmentKind.PSEUDO_CLASS]
    methods = {
        FragmentKind.ELEMENT: SelectorBuilder.element,
        FragmentKind.ID: SelectorBuilder.id,
        FragmentKind.CLASS: SelectorBuilder.class_,
        FragmentKind.ATTRIBUTE: SelectorBuilder.attribute,
        FragmentKind.PSEUDO_CLASS: SelectorBuilder.pseudo_class,
        FragmentKind.PSEUDO_ELEMENT: SelectorBuilder.pseudo_element,
    }

    for singles in itertools.product((0, 1), repeat=len(optional)):
        for repeats in itertools.product((0, 1, 2), repeat=len(repeatable)):
            counts = dict(zip(optional, singles))
            counts.update(zip(repeatable, repeats))
            kinds = sorted(
                (kind for kind, count in counts.items() for _ in range(count)),
                key=lambda kind: kind.rank
            )

            selector = SelectorBuilder()
            for kind in kinds:
                methods[kind](selector, "x")
            assert len(selector) == len(kinds)

def test_singletons_twice(builder):
    with pytest.raises(DuplicateSingletonError):
        builder.element("a").element("b")
    with pytest.raises(DuplicateSingletonError):
        builder.id("a").id("b")
    with pytest.raises(DuplicateSingletonError):
        builder.pseudo_element("before").pseudo_element("after")

def test_element_after_other_fragments(builder):
    selector = builder.element("div").id("main").class_("x")
    with pytest.raises(OrderViolationError):
        selector.element("span")

    with pytest.raises(OrderViolationError, match="should be arranged in the following order"):
        builder.class_("x").element("span")

def test_out_of_order_fragments(builder):
    with pytest.raises(OrderViolationError):
        builder.class_("x").id("main")
    with pytest.raises(OrderViolationError):
        builder.attribute("href").class_("x")
    with pytest.raises(OrderViolationError):
        builder.pseudo_class("hover").attribute("href")
    with pytest.raises(OrderViolationError):
        builder.pseudo_element("before").pseudo_class("hover")

def test_failed_append_leaves_selector_unchanged(builder):
    selector = builder.element("div").pseudo_class("hover")
    before = selector.fragments

    with pytest.raises(OrderViolationError):
        selector.class_("late")
    with pytest.raises(DuplicateSingletonError):
        selector.element("span")

    assert selector.fragments == before
    assert selector.stringify() == "div:hover"

def test_stringify_is_idempotent(builder):
    selector = builder.element("ul").class_("menu").pseudo_class("first-child")
    assert selector.stringify() == selector.stringify()
    assert str(selector) == selector.stringify()

def test_combine_pads_combinator(builder):
    left = builder.element("div").class_("card")
    right = builder.element("p").pseudo_class("first-of-type")

    for token in (">", "+", "~", " "):
        combined = builder.combine(left, token, right)
        assert combined.stringify() == left.stringify() + " " + token + " " + right.stringify()

def test_nested_combine(builder):
    selector = builder.combine(
        builder.element("table").id("data"),
        "~",
        builder.combine(
            builder.element("tr").pseudo_class("nth-of-type(even)"),
            " ",
            builder.element("td").pseudo_class("nth-of-type(even)")
        )
    )
    assert selector.stringify() == "table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)"

def test_deeply_nested_combine(builder):
    selector = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)")
            )
        )
    )
    assert selector.stringify() == (
        "div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)"
    )

def test_combine_copies_operands(builder):
    left = builder.element("div")
    right = builder.element("span")
    combined = builder.combine(left, ">", right)

    left.class_("later")
    right.pseudo_class("hover")

    assert combined.stringify() == "div > span"
    assert combined.fragments[1].kind == FragmentKind.COMBINATOR

def test_combine_accepts_any_token(builder):
    combined = builder.combine(builder.element("a"), "||", builder.element("b"))
    assert combined.stringify() == "a || b"

def test_strict_combine_rejects_unknown_token(strict_builder):
    with pytest.raises(InvalidCombinatorError):
        strict_builder.combine(strict_builder.element("a"), "||", strict_builder.element("b"))

    combined = strict_builder.combine(strict_builder.element("a"), ">", strict_builder.element("b"))
    assert combined.stringify() == "a > b"

def test_instance_combine_replaces_sequence():
    selector = SelectorBuilder().element("section")
    result = selector.combine(
        SelectorBuilder().element("ul"),
        ">",
        SelectorBuilder().element("li")
    )
    assert result is selector
    assert selector.stringify() == "ul > li"

def test_append_after_combine_extends_right_selector(builder):
    combined = builder.combine(builder.element("ul"), ">", builder.element("li"))
    combined.class_("active")
    assert combined.stringify() == "ul > li.active"

    with pytest.raises(DuplicateSingletonError):
        combined.element("a")

def test_specificity(builder):
    selector = (
        builder.element("a")
        .id("x")
        .class_("b")
        .attribute("c")
        .pseudo_class("hover")
        .pseudo_element("before")
    )
    assert selector.specificity() == (1, 3, 2)
    assert builder.element("*").class_("x").specificity() == (0, 1, 0)

def test_to_xpath(builder):
    xpath = builder.element("div").class_("x").to_xpath()
    assert xpath.startswith("descendant-or-self::div")
    assert "@class" in xpath

def test_to_xpath_rejects_pseudo_element(builder):
    with pytest.raises(InvalidSelectorError):
        builder.element("p").pseudo_element("first-line").to_xpath()

def test_select(builder, sample_html):
    links = builder.element("a").attribute('href$=".png"').select(sample_html)
    assert [link.text for link in links] == ["Logo"]

    cells = builder.combine(
        builder.element("table").id("data"),
        " ",
        builder.element("td")
    ).select(sample_html)
    assert len(cells) == 4

def test_repr(builder):
    assert repr(builder.element("a").class_("x")) == "SelectorBuilder('a.x')"

def test_singletons_scoped_to_right_compound(builder):
    combined = builder.combine(
        builder.element("a").pseudo_element("before"),
        " ",
        builder.class_("x")
    )
    combined.pseudo_element("after")
    assert combined.stringify() == "a::before   .x::after"

    with pytest.raises(DuplicateSingletonError):
        combined.pseudo_element("marker")
