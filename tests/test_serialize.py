"""Tests for graph/serialize.py - Renderer records and text listing."""

import json

import pytest

from probtree.graph.factory import parse_text
from probtree.graph.serialize import element_data, to_cytoscape, to_json, to_text
from probtree.layout import Size


class TestElementData:
    def test_node_keys(self):
        node = parse_text("A")[0]

        assert element_data(node) == {
            "id": "1",
            "indent": "",
            "count": None,
            "label": "A",
            "prob": "",
            "lineNumber": 1,
        }

    def test_edge_keys(self):
        edge = parse_text("A\n  0.5: B")[1]

        assert element_data(edge) == {
            "id": "1_2:0",
            "source": "1",
            "target": "2",
            "label": "0.5",
            "lineNumber": 2,
        }

    def test_size_flattened(self):
        class FixedSizer:
            def size(self, label):
                return Size(100.0, 75.0)

        data = element_data(parse_text("A", sizer=FixedSizer())[0])

        assert data["width"] == 100.0
        assert data["height"] == 75.0


class TestToCytoscape:
    def test_wrapped_in_data(self):
        records = to_cytoscape(parse_text("A\n  0.5: B\n  0.5: C"))

        assert len(records) == 5
        assert all(set(r) == {"data"} for r in records)
        assert records[2]["data"]["prob"] == "50.00%"

    def test_nan_count_becomes_none(self):
        records = to_cytoscape(parse_text("A\n  likely: B"))

        assert records[2]["data"]["count"] is None

    def test_does_not_mutate_elements(self):
        import math

        elements = parse_text("A\n  likely: B")
        to_cytoscape(elements)

        assert math.isnan(elements[2].count)


class TestToJson:
    def test_strict_json(self):
        text = to_json(parse_text("A\n  likely: B\n    0.5: C"))

        records = json.loads(text)
        assert [r["data"]["count"] for r in records if "indent" in r["data"]] == [
            None,
            None,
            None,
        ]

    def test_unicode_kept(self):
        assert "雨" in to_json(parse_text("天気\n  0.5：雨"))

    @pytest.mark.parametrize("indent", [None, 4])
    def test_indent(self, indent):
        text = to_json(parse_text("A"), indent=indent)

        assert ("\n" in text) == (indent is not None)


class TestToText:
    def test_listing(self):
        listing = to_text(parse_text("A\n  0.5: B"))

        assert listing.splitlines() == [
            "node  1      A  (line 1)",
            "edge  1_2:0  1 -> 2  [0.5]  (line 2)",
            "node  2        B  50.00%  (line 2)",
        ]

    def test_empty(self):
        assert to_text([]) == ""
