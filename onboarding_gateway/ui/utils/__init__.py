"""
UI utility functions.
"""

from onboarding_gateway.ui.utils.formatters import (
    format_error,
    format_code_sent,
    format_dashboard
)
from onboarding_gateway.ui.utils.state_manager import StepViewManager

__all__ = [
    "format_error",
    "format_code_sent",
    "format_dashboard",
    "StepViewManager"
]
