"""End-to-end integration tests."""

import pytest

from doctree_core import (
    Document,
    SearchOptions,
    VText,
    assign,
    enumerate_keys,
    from_native,
    remove,
    resolve,
    search,
    to_native,
)


def test_resolve_assign_remove_scenario():
    tree = from_native({"a": {"b": [1, 2, 3]}})
    assert to_native(resolve(tree, "a.b")) == [1, 2, 3]
    assign(tree, "a.c", VText("x"))
    assert to_native(tree) == {"a": {"b": [1, 2, 3], "c": "x"}}
    remove(tree, "a.b")
    assert to_native(tree) == {"a": {"c": "x"}}


def test_enumerate_scenario():
    assert enumerate_keys(from_native({"x": {"y": 1}}), 5) == ["x", "x.y"]


def test_search_scenario():
    tree = from_native({"name": "widget", "tags": ["red", "blue"]})
    results = search(tree, "red", SearchOptions(search_values=True))
    assert len(results) == 1
    assert results[0].path == "tags[0]"
    assert results[0].preview == "red"


def test_auto_create_scenario():
    assert to_native(assign(from_native({}), "a.b.c", from_native(5))) == {"a": {"b": {"c": 5}}}


@pytest.mark.parametrize(
    "filename, text",
    [
        ("doc.json", '{"server": {"host": "db.local", "port": "5432"}}'),
        ("doc.yaml", "server:\n  host: db.local\n  port: '5432'\n"),
        ("doc.toml", '[server]\nhost = "db.local"\nport = "5432"\n'),
        ("doc.xml", "<server><host>db.local</host><port>5432</port></server>"),
    ],
)
def test_same_engine_across_formats(tmp_path, filename, text):
    path = tmp_path / filename
    path.write_text(text, encoding="utf-8")
    doc = Document.load(path)

    keys = enumerate_keys(doc.tree)
    assert "server.host" in keys
    assert to_native(resolve(doc.tree, "server.port")) == "5432"
    assert [m.path for m in search(doc.tree, "db.local", SearchOptions(search_keys=False))] == [
        "server.host"
    ]

    assign(doc.tree, "server.user", VText("admin"))
    remove(doc.tree, "server.port")
    doc.save()

    reloaded = Document.load(path)
    assert to_native(reloaded.tree) == {"server": {"host": "db.local", "user": "admin"}}
