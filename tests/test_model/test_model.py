"""Tests for Declaration, Rule and the border property tables."""

import pytest

from bordermerge.model import BORDER, BorderProperty, Declaration, Edge, Facet, Kind, Rule
from bordermerge.model.properties import TRACKED_NAMES, longhands_of


# ---------------------------------------------------------------------------
# BorderProperty
# ---------------------------------------------------------------------------


class TestBorderProperty:
    def test_kinds(self):
        assert BORDER.kind is Kind.SHORTHAND
        assert BorderProperty(edge=Edge.TOP).kind is Kind.EDGE
        assert BorderProperty(facet=Facet.COLOR).kind is Kind.FACET
        assert BorderProperty(Edge.LEFT, Facet.STYLE).kind is Kind.LONGHAND

    def test_names(self):
        assert BORDER.name == "border"
        assert BorderProperty(edge=Edge.BOTTOM).name == "border-bottom"
        assert BorderProperty(facet=Facet.WIDTH).name == "border-width"
        assert BorderProperty(Edge.RIGHT, Facet.COLOR).name == "border-right-color"

    def test_parse_is_case_insensitive(self):
        assert BorderProperty.parse("Border-Top-Width") == BorderProperty(Edge.TOP, Facet.WIDTH)

    def test_parse_untracked(self):
        assert BorderProperty.parse("border-image") is None
        assert BorderProperty.parse("border-radius") is None
        assert BorderProperty.parse("color") is None

    def test_longhands(self):
        assert len(BORDER.longhands) == 12
        assert BorderProperty(edge=Edge.TOP).longhands == {
            "border-top-width",
            "border-top-style",
            "border-top-color",
        }
        assert BorderProperty(facet=Facet.STYLE).longhands == {
            "border-top-style",
            "border-right-style",
            "border-bottom-style",
            "border-left-style",
        }

    def test_longhands_of_untracked(self):
        assert longhands_of("margin") == frozenset()

    def test_tables(self):
        assert len(TRACKED_NAMES) == 20


# ---------------------------------------------------------------------------
# Declaration
# ---------------------------------------------------------------------------


class TestDeclaration:
    def test_str(self):
        assert str(Declaration("border", "1px solid red")) == "border: 1px solid red"
        assert str(Declaration("color", "red", True)) == "color: red !important"

    def test_clone_keeps_importance(self):
        decl = Declaration("border", "1px", important=True)
        copy = decl.clone(prop="border-top")
        assert copy is not decl
        assert copy.prop == "border-top"
        assert copy.value == "1px"
        assert copy.important is True

    def test_identity_equality(self):
        assert Declaration("a", "b") != Declaration("a", "b")


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------


@pytest.fixture()
def decls():
    return [Declaration("a", "1"), Declaration("b", "2"), Declaration("c", "3")]


class TestRule:
    def test_sequence_protocol(self, decls):
        rule = Rule(decls, selector="p")
        assert len(rule) == 3
        assert rule[1] is decls[1]
        assert list(rule) == decls
        assert decls[0] in rule
        assert Declaration("a", "1") not in rule

    def test_index_by_identity(self, decls):
        rule = Rule(decls)
        assert rule.index(decls[2]) == 2
        with pytest.raises(ValueError):
            rule.index(Declaration("a", "1"))

    def test_next(self, decls):
        rule = Rule(decls)
        assert rule.next(decls[0]) is decls[1]
        assert rule.next(decls[2]) is None

    def test_insert_before_and_after(self, decls):
        rule = Rule(decls)
        x, y = Declaration("x", "0"), Declaration("y", "0")
        rule.insert_before(decls[0], x)
        rule.insert_after(decls[2], y)
        assert [d.prop for d in rule] == ["x", "a", "b", "c", "y"]

    def test_remove(self, decls):
        rule = Rule(decls)
        rule.remove(decls[1])
        assert [d.prop for d in rule] == ["a", "c"]

    def test_replace_splices(self, decls):
        rule = Rule(decls)
        rule.replace(decls[1], [Declaration("x", "0"), Declaration("y", "0")])
        assert [d.prop for d in rule] == ["a", "x", "y", "c"]

    def test_iteration_is_a_snapshot(self, decls):
        rule = Rule(decls)
        for decl in rule:
            rule.remove(decl)
        assert len(rule) == 0

    def test_append(self, decls):
        rule = Rule(decls[:1])
        rule.append(*decls[1:])
        assert rule.declarations == decls
