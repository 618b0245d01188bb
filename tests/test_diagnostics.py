"""Tests for graph/diagnostics.py - Optional parse warnings."""

import pytest

from probtree.graph import Diagnostics, WarningKind
from probtree.graph.factory import parse_text
from probtree.graph.serialize import to_cytoscape


class TestDiagnosticsCollector:
    def test_add_and_iterate(self):
        diagnostics = Diagnostics()
        warning = diagnostics.add(3, WarningKind.ORPHAN_INDENT, "no parent")

        assert list(diagnostics) == [warning]
        assert len(diagnostics) == 1

    def test_str(self):
        diagnostics = Diagnostics()
        warning = diagnostics.add(3, WarningKind.ORPHAN_INDENT, "no parent")

        assert str(warning) == "line 3: [orphan-indent] no parent"

    def test_by_kind_and_clear(self):
        diagnostics = Diagnostics()
        diagnostics.add(1, WarningKind.ORPHAN_INDENT, "a")
        diagnostics.add(2, WarningKind.UNRESOLVED_TARGET, "b")

        assert [w.line_number for w in diagnostics.by_kind(WarningKind.UNRESOLVED_TARGET)] == [2]

        diagnostics.clear()
        assert len(diagnostics) == 0


class TestParseWarnings:
    """Warnings reported by parse_text."""

    def _warnings(self, text, **kwargs):
        diagnostics = Diagnostics()
        parse_text(text, diagnostics=diagnostics, **kwargs)
        return [(w.line_number, w.kind) for w in diagnostics]

    def test_clean_outline(self, weather_outline):
        assert self._warnings(weather_outline) == []

    def test_non_numeric_edge_label(self):
        """Reported once, on the line with the bad label, not on descendants."""
        warnings = self._warnings("A\n  likely: B\n    0.5: C")

        assert warnings == [(2, WarningKind.NON_NUMERIC_EDGE_LABEL)]

    def test_missing_edge_label(self):
        assert self._warnings("A\n  B") == [(2, WarningKind.NON_NUMERIC_EDGE_LABEL)]

    def test_orphan_indent(self):
        assert self._warnings("  A\nB") == [(1, WarningKind.ORPHAN_INDENT)]

    def test_unresolved_target(self):
        assert self._warnings("A\n  0.5: (Nowhere)") == [(2, WarningKind.UNRESOLVED_TARGET)]

    def test_link_without_parent(self):
        """A link at the top level has nowhere to start, so it is reported."""
        assert self._warnings("(B)\nB") == [(1, WarningKind.DROPPED_LINK)]

    def test_indented_link_without_parent(self):
        assert self._warnings("  0.3: (B)\nB") == [
            (1, WarningKind.ORPHAN_INDENT),
            (1, WarningKind.DROPPED_LINK),
        ]

    def test_duplicate_label(self):
        assert self._warnings("A\n  0.5: B\n  0.5: B") == [(3, WarningKind.DUPLICATE_LABEL)]

    def test_line_numbers_include_offset(self):
        assert self._warnings("  A", starting_line_number=40) == [
            (41, WarningKind.ORPHAN_INDENT)
        ]

    @pytest.mark.parametrize(
        "text",
        ["A\n  likely: B\n    0.5: C", "  A\nB\n  0.5: (Nowhere)\n  0.5: B\n  0.5: B", "(B)\nB"],
    )
    def test_output_unchanged(self, text):
        assert to_cytoscape(parse_text(text, diagnostics=Diagnostics())) == to_cytoscape(
            parse_text(text)
        )
