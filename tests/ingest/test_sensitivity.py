"""Tests for sensitivity tree merging."""

import pytest
from tfplanformat.ingest.sensitivity import SensitivityMap, merge_sensitivity


class TestMergeSensitivity:
    """Test merging before/after sensitivity."""
    
    def test_absent_means_not_sensitive(self):
        merged = merge_sensitivity(None, None)
        assert merged.sensitive is False
        assert merged.child("anything").sensitive is False
    
    def test_false_and_empty_objects(self):
        merged = merge_sensitivity(False, {})
        assert merged.sensitive is False
        assert merged.children == {}
    
    def test_true_covers_all_descendants(self):
        merged = merge_sensitivity(True, None)
        assert merged.sensitive is True
        assert merged.child("a").child("b").child("0").sensitive is True
    
    def test_logical_or_across_sides(self):
        merged = merge_sensitivity({"input": True, "output": True}, {"input": True})
        assert merged.child("input").sensitive is True
        assert merged.child("output").sensitive is True
        assert merged.child("id").sensitive is False
    
    def test_after_side_only(self):
        merged = merge_sensitivity({}, {"password": True})
        assert merged.child("password").sensitive is True
        assert merged.sensitive is False
    
    def test_nested_mapping_overrides_per_key(self):
        merged = merge_sensitivity({"config": {"token": True, "name": False}}, None)
        config = merged.child("config")
        assert config.sensitive is False
        assert config.child("token").sensitive is True
        assert config.child("name").sensitive is False
    
    def test_false_overrides_inherited_flag(self):
        merged = merge_sensitivity({"a": False}, None, before_inherited=True)
        assert merged.sensitive is True
        assert merged.child("a").sensitive is False
        assert merged.child("b").sensitive is True
    
    def test_sequence_indices(self):
        merged = merge_sensitivity([False, True], [True])
        assert merged.child("0").sensitive is True
        assert merged.child("1").sensitive is True
        assert merged.child("2").sensitive is False
    
    def test_child_of_plain_map_is_not_sensitive(self):
        assert SensitivityMap().child("x").sensitive is False
    
    @pytest.mark.parametrize("before,after", [
        ("yes", None),
        (None, 1),
        ({"password": "true"}, None),
        ([True, 0], None),
    ])
    def test_malformed_markers_are_rejected(self, before, after):
        with pytest.raises(ValueError, match="must be a bool, object or array"):
            merge_sensitivity(before, after)
