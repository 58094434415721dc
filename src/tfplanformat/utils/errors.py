"""Custom exception classes for tf-plan-format."""

from typing import List, Optional


class TfPlanFormatError(Exception):
    """
    Base exception for all tf-plan-format errors.
    
    Carries the plan file and resource address when known so the failure can
    be located.
    """

    def __init__(self, message: str, source_path: Optional[str] = None, address: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.source_path = source_path
        self.address = address

    def __str__(self) -> str:
        if self.source_path:
            return f"{self.source_path}: {self.message}"
        return self.message


class PlanLoadError(TfPlanFormatError):
    """Raised when a Terraform plan file cannot be read."""
    pass


class MalformedPlanError(PlanLoadError):
    """Raised when plan JSON is invalid or a required field is missing or mis-shaped."""
    pass


class UnknownActionCombinationError(TfPlanFormatError):
    """Raised when a resource's action list has no known change kind."""

    def __init__(self, actions: List[str], address: Optional[str] = None, source_path: Optional[str] = None):
        self.actions = list(actions)
        message = f"Unknown action combination {self.actions}"
        if address:
            message += f" for resource {address}"
        super().__init__(message, source_path=source_path, address=address)


class TemplateRenderError(TfPlanFormatError):
    """Raised when a template cannot be compiled or rendered."""
    pass


class ConfigError(TfPlanFormatError):
    """Raised when configuration is invalid or missing."""
    pass
