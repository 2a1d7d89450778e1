"""
Formatters for UI display - error lines and onboarding summaries.
"""

from typing import Optional

from onboarding_gateway.core.models import OnboardingSession


def _escape_markdown(text: str) -> str:
    """Escape characters that Markdown would interpret."""
    for char in ("\\", "`", "*", "_", "[", "]", "<", ">", "#"):
        text = text.replace(char, "\\" + char)
    return text


def format_error(message: Optional[str]) -> str:
    """
    Format an error message for a step's error line.

    Args:
        message: Error message, or None when the step succeeded

    Returns:
        Markdown string (empty when there is nothing to show)
    """
    if not message:
        return ""
    return f"❌ {_escape_markdown(message)}"


def format_code_sent(destination: str) -> str:
    """Prompt shown above a code input."""
    if not destination:
        return "Enter the 6-digit code we sent you."
    return f"Enter the 6-digit code sent to **{_escape_markdown(destination)}**."


def format_dashboard(session: OnboardingSession) -> str:
    """
    Summary shown once onboarding is complete.

    Args:
        session: Completed onboarding session

    Returns:
        Markdown summary of the verified contact details
    """
    return (
        "### ✅ You're all set!\n\n"
        f"- **Phone:** {_escape_markdown(session.phone) or '-'}\n"
        f"- **Email:** {_escape_markdown(session.email) or '-'}\n"
    )
