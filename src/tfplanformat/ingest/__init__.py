"""Plan ingestion: loading, validation, sensitivity merging and parsing."""

from .models import ResourceChange, PrimitiveAction
from .plan_loader import load_plan_json, load_plan_text
from .plan_parser import parse_plan, parse_plan_text
from .sensitivity import SensitivityMap, merge_sensitivity
from .values import ABSENT, REDACTED, ValueKind, kind_of, values_equal, render_value

__all__ = [
    "ResourceChange",
    "PrimitiveAction",
    "load_plan_json",
    "load_plan_text",
    "parse_plan",
    "parse_plan_text",
    "SensitivityMap",
    "merge_sensitivity",
    "ABSENT",
    "REDACTED",
    "ValueKind",
    "kind_of",
    "values_equal",
    "render_value",
]
