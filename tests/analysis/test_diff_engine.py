"""Tests for the structural diff engine."""

import pytest
from tfplanformat.analysis.diff_engine import DiffKind, diff_values, diff_resource
from tfplanformat.ingest import ABSENT, REDACTED, ResourceChange, merge_sensitivity
from tfplanformat.report.context_builder import flatten_diff


def _changed(node):
    return [(line.path, line.before, line.after) for line in flatten_diff(node) if line.changed]


class TestDiffValues:
    """Test value-level diffing."""
    
    def test_only_changed_leaf_is_reported(self):
        node = diff_values({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 3}})
        
        assert node.kind == DiffKind.CHANGED
        assert _changed(node) == [("b.c", "2", "3")]
    
    def test_identical_values_are_unchanged(self):
        node = diff_values({"a": [1, 2], "b": None}, {"a": [1, 2], "b": None})
        assert node.kind == DiffKind.UNCHANGED
        assert all(not line.changed for line in flatten_diff(node))
    
    def test_missing_key_compares_as_null(self):
        """A key present on one side only is a null transition, not a removal."""
        node = diff_values({"input": "foo", "output": "foo"}, {"input": "bar"})
        output = dict(node.children)["output"]
        
        assert output.kind == DiffKind.CHANGED
        assert output.before_display == '"foo"'
        assert output.after_display == "null"
    
    def test_value_to_null(self):
        node = diff_values({"output": "foo"}, {"output": None})
        assert _changed(node) == [("output", '"foo"', "null")]
    
    def test_bool_versus_number_is_a_change(self):
        node = diff_values(True, 1)
        assert node.kind == DiffKind.CHANGED
        assert (node.before_display, node.after_display) == ("true", "1")
    
    def test_type_change_is_a_single_leaf(self):
        node = diff_values({"a": {"x": 1}}, {"a": [1]})
        a = dict(node.children)["a"]
        assert a.kind == DiffKind.CHANGED
        assert a.is_leaf
        assert (a.before_display, a.after_display) == ('{"x":1}', "[1]")
    
    def test_both_absent_is_rejected(self):
        with pytest.raises(ValueError):
            diff_values(ABSENT, ABSENT)
    
    def test_mapping_keys_are_sorted(self):
        node = diff_values({"b": 1, "a": 1}, {"c": 1, "b": 2, "a": 1})
        assert [key for key, _ in node.children] == ["a", "b", "c"]


class TestSequenceDiff:
    """Test index-by-index sequence diffing."""
    
    def test_appended_element_is_added(self):
        node = diff_values({"tags": ["a"]}, {"tags": ["a", "b"]})
        lines = flatten_diff(node)
        
        assert [line.path for line in lines] == ["tags[0]", "tags[1]"]
        assert lines[0].changed is False
        assert lines[1].added is True
        assert lines[1].after == '"b"'
    
    def test_dropped_element_is_removed(self):
        node = diff_values([1, 2, 3], [1, 2])
        third = dict(node.children)[2]
        assert third.kind == DiffKind.REMOVED
        assert third.before_display == "3"
    
    def test_reorder_is_per_index_change(self):
        node = diff_values(["x", "y"], ["y", "x"])
        assert _changed(node) == [("[0]", '"x"', '"y"'), ("[1]", '"y"', '"x"')]
    
    def test_nested_index_path(self):
        node = diff_values({"ingress": [{"port": 80}]}, {"ingress": [{"port": 443}]})
        assert _changed(node) == [("ingress[0].port", "80", "443")]


class TestCollapsing:
    """Test collapsing of unchanged subtrees."""
    
    def test_unchanged_nested_subtree_collapses(self):
        node = diff_values({"a": {"b": 1}, "c": 1}, {"a": {"b": 1}, "c": 2})
        a = dict(node.children)["a"]
        assert a.kind == DiffKind.UNCHANGED
        assert a.is_leaf
        assert a.before_display == '{"b":1}'
    
    def test_full_depth_expands_unchanged_subtree(self):
        node = diff_values({"a": {"b": 1}, "c": 1}, {"a": {"b": 1}, "c": 2}, full_depth=True)
        a = dict(node.children)["a"]
        assert not a.is_leaf
        assert [line.path for line in flatten_diff(node)] == ["a.b", "c"]
    
    def test_root_is_always_expanded(self):
        node = diff_values({"a": 1}, {"a": 1})
        assert [key for key, _ in node.children] == ["a"]
    
    def test_added_root_carries_added_children(self):
        node = diff_values(ABSENT, {"input": "foo", "triggers_replace": None})
        assert node.kind == DiffKind.ADDED
        assert [(k, c.kind) for k, c in node.children] == [
            ("input", DiffKind.ADDED),
            ("triggers_replace", DiffKind.ADDED),
        ]
    
    def test_removed_root_carries_removed_children(self):
        node = diff_values({"id": "x"}, ABSENT)
        assert node.kind == DiffKind.REMOVED
        assert dict(node.children)["id"].kind == DiffKind.REMOVED


class TestRedaction:
    """Test sensitive value handling."""
    
    def test_sensitive_leaf_is_redacted_but_classified(self):
        sensitivity = merge_sensitivity({"password": True}, {"password": True})
        node = diff_values({"password": "old"}, {"password": "new"}, sensitivity)
        password = dict(node.children)["password"]
        
        assert password.kind == DiffKind.CHANGED
        assert password.before_display == REDACTED
        assert password.after_display == REDACTED
    
    def test_unchanged_sensitive_leaf(self):
        sensitivity = merge_sensitivity({"password": True}, None)
        node = diff_values({"password": "same"}, {"password": "same"}, sensitivity)
        assert dict(node.children)["password"].kind == DiffKind.UNCHANGED
    
    def test_sensitive_composite_is_one_leaf(self):
        sensitivity = merge_sensitivity({"config": True}, None)
        node = diff_values({"config": {"a": 1}}, {"config": {"a": 2}}, sensitivity)
        config = dict(node.children)["config"]
        assert config.is_leaf
        assert config.kind == DiffKind.CHANGED
    
    def test_secret_never_appears_in_displays(self):
        sensitivity = merge_sensitivity({"db": {"password": True}}, {"db": {"password": True}})
        node = diff_values(
            {"db": {"password": "hunter2", "user": "a"}},
            {"db": {"password": "hunter3", "user": "b"}},
            sensitivity,
        )
        for line in flatten_diff(node):
            assert "hunter" not in (line.before or "")
            assert "hunter" not in (line.after or "")
        assert "hunter" not in (node.before_display + node.after_display)
    
    def test_added_sensitive_value(self):
        sensitivity = merge_sensitivity(None, {"token": True})
        node = diff_values(ABSENT, {"token": "abc"}, sensitivity)
        token = dict(node.children)["token"]
        assert token.kind == DiffKind.ADDED
        assert token.after_display == REDACTED


class TestDiffResource:
    """Test resource-level diffing."""
    
    def test_none_before_is_absent(self):
        change = ResourceChange(address="a.b", actions=["create"], before=None, after={"x": 1})
        assert diff_resource(change).kind == DiffKind.ADDED
    
    def test_none_after_is_absent(self):
        change = ResourceChange(address="a.b", actions=["delete"], before={"x": 1}, after=None)
        assert diff_resource(change).kind == DiffKind.REMOVED
