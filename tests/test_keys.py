"""Tests for key enumeration."""

from doctree_core import enumerate_keys, from_native


def test_nested_mapping():
    assert enumerate_keys(from_native({"x": {"y": 1}}), 5) == ["x", "x.y"]


def test_preorder_with_sequences():
    tree = from_native({"items": [{"id": 1}, 2], "name": "n"})
    assert enumerate_keys(tree) == [
        "items",
        "items[0]",
        "items[0].id",
        "items[1]",
        "name",
    ]


def test_root_sequence_uses_bare_brackets():
    assert enumerate_keys(from_native([{"a": 1}])) == ["[0]", "[0].a"]


def test_long_sequence_truncated_with_marker():
    tree = from_native({"xs": list(range(13))})
    keys = enumerate_keys(tree)
    assert keys[0] == "xs"
    assert keys[1:11] == [f"xs[{i}]" for i in range(10)]
    assert keys[11] == "xs[...3 more items]"
    assert len(keys) == 12


def test_exactly_ten_items_has_no_marker():
    keys = enumerate_keys(from_native({"xs": list(range(10))}))
    assert not any("more items" in k for k in keys)


def test_mappings_are_not_capped():
    tree = from_native({f"k{i}": i for i in range(30)})
    assert len(enumerate_keys(tree)) == 30


def test_depth_limit():
    tree = from_native({"a": {"b": {"c": {"d": 1}}}})
    assert enumerate_keys(tree, 2) == ["a", "a.b"]
    assert enumerate_keys(tree, 0) == []


def test_scalar_root_has_no_keys():
    assert enumerate_keys(from_native(42)) == []
