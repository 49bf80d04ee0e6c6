"""Tests for the format front-ends and registry."""

import json
import math

import pytest

from doctree_core import (
    DecodeError,
    EncodeError,
    UnsupportedFormatError,
    VDict,
    VList,
    VNull,
    VNumber,
    VText,
    from_native,
    format_for_path,
    get_format,
    to_native,
)
from doctree_core.formats import JSONFormat, TOMLFormat, XMLFormat, YAMLFormat


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestRegistry:
    def test_get_format_case_insensitive(self):
        assert isinstance(get_format("JSON"), JSONFormat)

    def test_unknown_format(self):
        with pytest.raises(UnsupportedFormatError):
            get_format("ini")

    @pytest.mark.parametrize(
        "path, name",
        [
            ("a.json", "json"),
            ("conf/app.YAML", "yaml"),
            ("b.yml", "yaml"),
            ("pyproject.toml", "toml"),
            ("feed.xml", "xml"),
        ],
    )
    def test_format_for_path(self, path, name):
        assert format_for_path(path).name == name

    def test_unknown_extension(self):
        with pytest.raises(UnsupportedFormatError):
            format_for_path("notes.txt")


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

class TestJSON:
    fmt = JSONFormat()

    def test_decode(self):
        tree = self.fmt.decode('{"a": 1, "b": [true, null]}')
        assert to_native(tree) == {"a": 1, "b": [True, None]}

    def test_encode_pretty(self):
        tree = from_native({"a": 1, "b": [True, None]})
        assert self.fmt.encode(tree) == json.dumps({"a": 1, "b": [True, None]}, indent=2)

    def test_encode_compact(self):
        tree = from_native({"a": 1.5, "b": "é"})
        assert self.fmt.encode(tree, compact=True) == '{"a":1.5,"b":"é"}'

    def test_decode_error_has_position(self):
        with pytest.raises(DecodeError) as info:
            self.fmt.decode('{\n  "a": }')
        assert info.value.line == 2
        assert "Invalid JSON" in str(info.value)

    def test_validate(self):
        assert self.fmt.validate("[1, 2]") == (True, "JSON is valid")
        valid, message = self.fmt.validate("[1, 2")
        assert valid is False
        assert message.startswith("Invalid JSON")

    def test_out_of_range_integer(self):
        with pytest.raises(DecodeError) as info:
            self.fmt.decode("[1" + "0" * 400 + "]")
        assert "out of range" in str(info.value)
        assert self.fmt.validate("1" + "0" * 400)[0] is False

    def test_nan_and_infinity_literals(self):
        tree = self.fmt.decode('{"a": NaN, "b": Infinity}')
        assert math.isnan(tree.entries["a"].value)
        assert tree.entries["b"] == VNumber(float("inf"))


# ---------------------------------------------------------------------------
# YAML
# ---------------------------------------------------------------------------

class TestYAML:
    fmt = YAMLFormat()

    def test_decode(self):
        tree = self.fmt.decode("a: 1\nb: [x, y]\n")
        assert to_native(tree) == {"a": 1, "b": ["x", "y"]}

    def test_multi_document_stream(self):
        tree = self.fmt.decode("a: 1\n---\nb: 2\n")
        assert isinstance(tree, VList)
        assert to_native(tree) == [{"a": 1}, {"b": 2}]

    def test_empty_stream(self):
        assert self.fmt.decode("") == VNull()

    def test_dates_become_text(self):
        assert self.fmt.decode("d: 2024-01-15\n") == VDict({"d": VText("2024-01-15")})

    def test_encode_keeps_order(self):
        tree = from_native({"z": 1, "a": ["x"]})
        assert self.fmt.encode(tree) == "z: 1\na:\n- x\n"

    def test_round_trip(self):
        data = {"server": {"host": "localhost", "ports": [80, 443]}, "debug": False}
        assert to_native(self.fmt.decode(self.fmt.encode(from_native(data)))) == data

    def test_compact_is_single_line(self):
        out = self.fmt.encode(from_native({"a": [1, 2], "b": {"c": "d"}}), compact=True)
        assert out.strip().count("\n") == 0

    def test_decode_error(self):
        with pytest.raises(DecodeError) as info:
            self.fmt.decode("a: [1, 2\nb: 3\n")
        assert info.value.line is not None

    def test_non_finite_floats(self):
        tree = self.fmt.decode("a: .inf\nb: -.inf\nc: .nan\n")
        assert tree.entries["a"] == VNumber(float("inf"))
        assert tree.entries["b"] == VNumber(float("-inf"))
        assert math.isnan(tree.entries["c"].value)

    def test_out_of_range_integer(self):
        with pytest.raises(DecodeError):
            self.fmt.decode("a: 1" + "0" * 400 + "\n")


# ---------------------------------------------------------------------------
# TOML
# ---------------------------------------------------------------------------

class TestTOML:
    fmt = TOMLFormat()

    def test_decode(self):
        tree = self.fmt.decode('title = "x"\n[server]\nport = 8080\n')
        assert to_native(tree) == {"title": "x", "server": {"port": 8080}}

    def test_datetime_becomes_text(self):
        tree = self.fmt.decode("when = 1979-05-27T07:32:00\n")
        assert tree == VDict({"when": VText("1979-05-27T07:32:00")})

    def test_round_trip(self):
        data = {"title": "x", "server": {"port": 8080, "hosts": ["a", "b"]}}
        assert to_native(self.fmt.decode(self.fmt.encode(from_native(data)))) == data

    def test_null_cannot_be_written(self):
        with pytest.raises(EncodeError) as info:
            self.fmt.encode(from_native({"a": {"b": None}}))
        assert "a.b" in str(info.value)

    def test_root_must_be_mapping(self):
        with pytest.raises(EncodeError):
            self.fmt.encode(from_native([1, 2]))

    def test_decode_error(self):
        with pytest.raises(DecodeError):
            self.fmt.decode("a = \n")

    def test_non_finite_floats(self):
        tree = self.fmt.decode("a = inf\nb = nan\n")
        assert tree.entries["a"] == VNumber(float("inf"))
        assert math.isnan(tree.entries["b"].value)
        assert "a = inf" in self.fmt.encode(tree)


# ---------------------------------------------------------------------------
# XML
# ---------------------------------------------------------------------------

SAMPLE_XML = '<root a="1"><item>x</item><item>y</item><name>n</name></root>'


class TestXML:
    fmt = XMLFormat()

    def test_decode_attributes_and_repeats(self):
        tree = self.fmt.decode(SAMPLE_XML)
        assert to_native(tree) == {
            "root": {"@_a": "1", "item": ["x", "y"], "name": "n"},
        }

    def test_decode_text_with_attributes(self):
        tree = self.fmt.decode('<r><t lang="en">hi</t></r>')
        assert to_native(tree) == {"r": {"t": {"@_lang": "en", "#text": "hi"}}}

    def test_decode_empty_element(self):
        assert to_native(self.fmt.decode("<r/>")) == {"r": ""}

    def test_encode_compact(self):
        tree = self.fmt.decode(SAMPLE_XML)
        out = self.fmt.encode(tree, compact=True)
        assert out == '<?xml version="1.0" encoding="UTF-8"?>' + SAMPLE_XML

    def test_pretty_round_trip(self):
        tree = self.fmt.decode(SAMPLE_XML)
        out = self.fmt.encode(tree)
        assert out.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        assert self.fmt.decode(out) == tree

    def test_encode_scalars(self):
        tree = from_native({"r": {"n": 3, "flag": True, "none": None}})
        out = self.fmt.encode(tree, compact=True)
        assert "<n>3</n>" in out
        assert "<flag>true</flag>" in out
        assert "<none />" in out

    def test_encode_non_finite_numbers(self):
        tree = from_native({"r": {"hi": float("inf"), "x": float("nan")}})
        out = self.fmt.encode(tree, compact=True)
        assert "<hi>inf</hi>" in out
        assert "<x>nan</x>" in out

    def test_encode_requires_single_root(self):
        with pytest.raises(EncodeError):
            self.fmt.encode(from_native({"a": "1", "b": "2"}))

    def test_encode_rejects_nested_sequences(self):
        with pytest.raises(EncodeError):
            self.fmt.encode(from_native({"r": {"x": [[1, 2]]}}))

    def test_decode_error(self):
        with pytest.raises(DecodeError) as info:
            self.fmt.decode("<root><open></root>")
        assert info.value.line == 1
