"""Pydantic models for parsed resource changes."""

from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, Field
from .sensitivity import SensitivityMap


class PrimitiveAction(str, Enum):
    """Terraform's primitive action vocabulary."""
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    NO_OP = "no-op"


class ResourceChange(BaseModel):
    """One resource or data source entry from a plan's resource_changes."""
    address: str = Field(..., description="Resource address, unique within a plan file")
    actions: List[str] = Field(default_factory=list, description="Ordered primitive actions, e.g. ['delete', 'create']")
    before: Optional[Any] = Field(None, description="Prior attribute state (None when absent)")
    after: Optional[Any] = Field(None, description="Proposed attribute state (None when absent)")
    sensitivity: SensitivityMap = Field(default_factory=SensitivityMap, description="Merged before/after sensitivity tree")
    mode: Optional[str] = Field(None, description="'managed' or 'data'")
    type: Optional[str] = Field(None, description="Resource type, e.g. terraform_data")
    name: Optional[str] = Field(None, description="Resource name")
    module_address: Optional[str] = Field(None, description="Module path if resource is in a module")
    provider_name: Optional[str] = Field(None, description="Provider source address")
