"""Command-line interface for tf-plan-format."""
