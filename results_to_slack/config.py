"""Configuration for a single notification run."""

from pathlib import Path

from pydantic import BaseModel, Field, SecretStr


class AlertConfig(BaseModel, frozen=True):
    """Alert conditions and display settings for the Slack message."""

    channel: str
    username: str = ""
    icon: str = ""
    header: str = ""
    notify_on_failure: bool = False
    notify_on_skipped: bool = False
    notify_on_success: bool = False
    notify_on_no_output: bool = False
    no_output_found_message: str = ""
    # CI run number appended to the message title when known
    run_number: str | None = None


class ActionConfig(BaseModel, frozen=True):
    """Everything the action needs, resolved once at startup."""

    report_path: Path
    webhook_url: SecretStr
    alerts: AlertConfig
    request_timeout: float = Field(default=10.0, gt=0)


def parse_flag(value: str | None) -> bool:
    """Interpret an action input as a boolean switch.

    Only ``true`` (any case) enables a switch; anything else, including an
    empty or unset input, leaves it disabled.
    """
    return (value or "").strip().lower() == "true"
