"""ABOUTME: Configuration management for the onboarding wizard suite
ABOUTME: Loads environment variables and provides configuration objects for the wizard, inbox and MFA poller"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class InvalidConfig(Exception):
    """Error for when the config is not valid"""


DEFAULT_BASE_URL = "https://lili-onboarding-integ.lili.co"
DEFAULT_INBOX_URL = "https://mailforspam.com/"


def to_bool(value: str | None, context_str: str = "") -> bool:
    """
    Convert string to boolean. Valid options (after stripping whitespace and making lower-case)
    - False: "false", "no", "off", "0", None, ""
    - True: "true", "yes", "on", "1"

    The `context_str` is there for the error message, to help find the issue.
    """
    if value is None:
        return False
    value = value.lower().strip()
    if value in ("false", "no", "off", "0", ""):
        return False
    if value in ("true", "yes", "on", "1"):
        return True
    raise ValueError(
        f"Cannot convert '{context_str}{value}' to boolean. Valid values are: true/false, 1/0, yes/no, on/off (case-insensitive)"
    )


def _positive_float(name: str, default: str) -> float:
    raw = os.environ.get(name, default)
    try:
        value = float(raw)
    except ValueError as error:
        raise InvalidConfig(f"{name} must be a number, got '{raw}'") from error
    if value < 0:
        raise InvalidConfig(f"{name} must not be negative, got {value}")
    return value


def _positive_int(name: str, default: str) -> int:
    raw = os.environ.get(name, default)
    try:
        value = int(raw)
    except ValueError as error:
        raise InvalidConfig(f"{name} must be an integer, got '{raw}'") from error
    if value < 0:
        raise InvalidConfig(f"{name} must not be negative, got {value}")
    return value


@dataclass(slots=True, kw_only=True)
class Viewport:
    width: int
    height: int

    def as_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(slots=True, kw_only=True)
class WizardCfg:
    base_url: str
    viewport: Viewport
    default_timeout_ms: int
    slow_mo_ms: int
    headless: bool

    def url_for(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    @classmethod
    def from_env(cls) -> "WizardCfg":
        return WizardCfg(
            base_url=os.environ.get("WIZARD_BASE_URL", DEFAULT_BASE_URL),
            viewport=Viewport(
                width=_positive_int("VIEWPORT_WIDTH", "1880"),
                height=_positive_int("VIEWPORT_HEIGHT", "798"),
            ),
            default_timeout_ms=_positive_int("DEFAULT_TIMEOUT_MS", "30000"),
            slow_mo_ms=_positive_int("SLOW_MO_MS", "0"),
            # headed locally, headless in CI - same rule as running in github actions
            headless=to_bool(os.environ.get("HEADLESS", os.environ.get("CI", "false")), context_str="HEADLESS="),
        )


@dataclass(slots=True, kw_only=True)
class InboxCfg:
    """Selectors and URL for the disposable inbox. These are a UI contract with a third party."""

    url: str = DEFAULT_INBOX_URL
    search_input: str = "#input_box"
    search_submit: str = 'input[type="submit"]'
    message_link_text: str = "One-time verification code"
    message_body: str = "#messagebody"
    viewport: Viewport = field(default_factory=lambda: Viewport(width=1880, height=798))

    @classmethod
    def from_env(cls) -> "InboxCfg":
        return InboxCfg(url=os.environ.get("INBOX_URL", DEFAULT_INBOX_URL))


@dataclass(slots=True, kw_only=True)
class MfaPollCfg:
    # all delays are in seconds
    initial_delay: float = 3.0
    interval: float = 2.0
    max_retries: int = 20
    render_delay: float = 1.0

    @property
    def max_attempts(self) -> int:
        """The first attempt plus every retry."""
        return self.max_retries + 1

    @property
    def total_wait(self) -> float:
        return self.initial_delay + self.max_retries * self.interval

    @classmethod
    def from_env(cls) -> "MfaPollCfg":
        return MfaPollCfg(
            initial_delay=_positive_float("MFA_INITIAL_DELAY", "3"),
            interval=_positive_float("MFA_POLL_INTERVAL", "2"),
            max_retries=_positive_int("MFA_MAX_RETRIES", "20"),
            render_delay=_positive_float("MFA_RENDER_DELAY", "1"),
        )


@dataclass(slots=True, kw_only=True)
class MfaLogCfg:
    path: Path

    @classmethod
    def from_env(cls) -> "MfaLogCfg":
        return MfaLogCfg(path=Path(os.environ.get("MFA_LOG_PATH", "test-results/mfa-codes.log")))


def is_development() -> bool:
    return os.environ.get("OBWIZARD_ENV", "development").lower().strip() == "development"


def get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper().strip()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise InvalidConfig(f"Unknown LOG_LEVEL '{level_name}'")
    return level


def e2e_enabled() -> bool:
    return to_bool(os.environ.get("RUN_E2E"), context_str="RUN_E2E=")


def network_debug_enabled() -> bool:
    return to_bool(os.environ.get("NETWORK_DEBUG"), context_str="NETWORK_DEBUG=")


def get_artifacts_path() -> Path:
    return Path(os.environ.get("ARTIFACTS_DIR", "test-results"))
