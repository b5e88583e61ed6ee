"""Tests for the stylesheet-level transform chain and minify()."""

import pytest

from bordermerge import MergeConfig, minify
from bordermerge.parser import parse_css
from bordermerge.stylesheet import serialize
from bordermerge.transforms import apply_transforms, builtin_transforms
from bordermerge.transforms.borders import BorderExplodeTransform, BorderMergeTransform


class TestBuiltinTransforms:
    def test_default_chain(self):
        chain = builtin_transforms()
        assert [type(t) for t in chain] == [BorderExplodeTransform, BorderMergeTransform]

    def test_without_explode(self):
        chain = builtin_transforms(MergeConfig(explode_first=False))
        assert [type(t) for t in chain] == [BorderMergeTransform]


class TestApplyTransforms:
    def test_facets_to_border(self):
        sheet = parse_css("a{border-width:1px;border-style:solid;border-color:red}")
        assert serialize(apply_transforms(sheet)) == "a{border:1px solid red}"

    def test_custom_transform_runs_last(self):
        seen = []

        class Recorder:
            def apply(self, stylesheet):
                seen.extend(d.prop for rule in stylesheet.walk_rules() for d in rule)
                return stylesheet

        sheet = parse_css("a{border-top:1px solid red;border-right:1px solid red;"
                          "border-bottom:1px solid red;border-left:1px solid red}")
        apply_transforms(sheet, custom_transforms=[Recorder()])
        assert seen == ["border"]

    def test_explode_transform_alone(self):
        sheet = parse_css("a{border-width:1px 2px}")
        BorderExplodeTransform().apply(sheet)
        assert serialize(sheet) == (
            "a{border-top-width:1px;border-right-width:2px;"
            "border-bottom-width:1px;border-left-width:2px}"
        )


class TestMinify:
    def test_edges(self):
        source = (
            "a { border-top: 1px solid red; border-right: 1px solid red; "
            "border-bottom: 1px solid red; border-left: 1px solid red; }"
        )
        assert minify(source) == "a{border:1px solid red}"

    def test_override_with_and_without_explode(self):
        source = "a{border:1px solid red;border-top:1px dashed red}"
        expected = "a{border:1px solid red;border-top-style:dashed}"
        assert minify(source) == expected
        assert minify(source, MergeConfig(explode_first=False)) == expected

    def test_nested_rules(self):
        source = (
            "@media print { a { border-top-width: 1px; border-top-style: solid; "
            "border-top-color: red } }"
        )
        assert minify(source) == "@media print{a{border-top:1px solid red}}"

    def test_non_border_declarations_untouched(self):
        assert minify("a { color: red; margin: 0 auto }") == "a{color:red;margin:0 auto}"

    def test_rules_are_independent(self):
        source = "a{border-top:1px solid red}b{border-top:1px solid red}"
        assert minify(source) == source

    def test_comment_inside_border(self):
        assert minify("a{border:1px /* note */ solid red}") == "a{border:1px solid red}"

    @pytest.mark.parametrize(
        "source",
        [
            "a{border:env(--w) solid red}",
            "a{border:1px solid red blue}",
            "a{background:url(data:image/png;base64,AAAA);border-width:1px}",
        ],
    )
    def test_left_as_written(self, source):
        assert minify(source) == source

    def test_pretty(self):
        assert minify("a{border-top:1px solid red}", MergeConfig(pretty=True)) == (
            "a {\n    border-top: 1px solid red;\n}\n"
        )
