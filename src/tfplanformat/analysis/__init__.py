"""Diffing, classification and aggregation of parsed resource changes."""

from .aggregator import PlanResult, ResourceResult, aggregate_plans, build_plan_result, process_plan_file
from .classifier import ChangeKind, classify
from .diff_engine import DiffKind, DiffNode, diff_resource, diff_values

__all__ = [
    "PlanResult",
    "ResourceResult",
    "aggregate_plans",
    "build_plan_result",
    "process_plan_file",
    "ChangeKind",
    "classify",
    "DiffKind",
    "DiffNode",
    "diff_resource",
    "diff_values",
]
