"""Tests for the rule emitter."""

from svgicon.cache import IconCache
from svgicon.css import AtRule, Rule, parse_stylesheet
from svgicon.emitter import ICON_PROPERTY, build_rule, emit_rules


def _cache() -> IconCache:
    cache = IconCache()
    cache.add("star", "red", "url(star-red)", ".a, .b", None)
    cache.add("star", "red", "url(star-red)", ".m1", "print")
    cache.add("moon", None, "url(moon)", ".c", None)
    cache.add("star", "red", "url(star-red)", ".d", None)
    cache.add("moon", None, "url(moon)", ".m2", "(min-width: 40em)")
    return cache


class TestBuildRule:
    def test_single_declaration(self):
        cache = IconCache()
        entry = cache.add("star", None, "url(x)", ".a, .b", None)
        rule = build_rule(entry)
        assert rule.selector == ".a, .b"
        assert [(d.prop, d.value) for d in rule.declarations] == [(ICON_PROPERTY, "url(x)")]


class TestEmitRules:
    def test_appends_after_existing_content(self):
        root = parse_stylesheet(".keep { color: blue; }")
        emit_rules(root, _cache())
        assert root.children[0].selector == ".keep"

    def test_no_media_block_precedes_media_block(self):
        root = parse_stylesheet(".keep { color: blue; }")
        count = emit_rules(root, _cache())
        emitted = root.children[1:]
        assert count == 4
        assert [type(n) for n in emitted] == [Rule, Rule, AtRule, AtRule]

    def test_insertion_order_within_each_block(self):
        root = parse_stylesheet("")
        emit_rules(root, _cache())
        plain = [n.selector for n in root.children if isinstance(n, Rule)]
        media = [(n.params, n.children[0].selector) for n in root.children if isinstance(n, AtRule)]
        assert plain == [".a, .b, .d", ".c"]
        assert media == [("print", ".m1"), ("(min-width: 40em)", ".m2")]

    def test_media_rule_is_wrapped(self):
        root = parse_stylesheet("")
        emit_rules(root, _cache())
        at_rule = root.children[2]
        assert isinstance(at_rule, AtRule)
        assert at_rule.name == "media"
        assert len(at_rule.children) == 1
        inner = at_rule.children[0]
        assert inner.parent is at_rule
        assert inner.declarations[0].value == "url(star-red)"

    def test_empty_cache_emits_nothing(self):
        root = parse_stylesheet(".keep { color: blue; }")
        assert emit_rules(root, IconCache()) == 0
        assert len(root.children) == 1
