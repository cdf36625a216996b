"""ABOUTME: MFA extraction request domain model and verification code parsing
ABOUTME: Pure functions for finding a 6 digit code in message text and formatting the debug log line"""

import re
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from obwizard.config import MfaPollCfg

CODE_LENGTH = 6

# exactly six ASCII digits that are not part of a longer run of digits
CODE_PATTERN = re.compile(r"(?<![0-9])[0-9]{6}(?![0-9])")
_FULL_CODE_PATTERN = re.compile(r"[0-9]{6}")


def extract_code(text: str | None) -> str | None:
    """Return the first 6 digit code in document order, or None if there isn't one."""
    if not text:
        return None
    match = CODE_PATTERN.search(text)
    return match.group(0) if match else None


def is_valid_code(code: object) -> bool:
    return isinstance(code, str) and _FULL_CODE_PATTERN.fullmatch(code) is not None


def format_log_line(email_prefix: str, code: str, at: datetime) -> str:
    return f"{at.isoformat()} | {email_prefix} | MFA: {code}"


def validate_email_prefix(email_prefix: object) -> str:
    if not isinstance(email_prefix, str) or not email_prefix.strip():
        raise ValueError("Email prefix must be a non-empty string")
    if "@" in email_prefix or any(char.isspace() for char in email_prefix):
        raise ValueError(f"Email prefix '{email_prefix}' must not contain '@' or whitespace")
    return email_prefix


class MfaExtractionRequest:
    """A single request to find the verification code sent to one disposable inbox.

    The deadline is when the poller will have given up: the initial delivery wait
    plus every retry interval.
    """

    def __init__(self, email_prefix: str, created_at: datetime, deadline: datetime):
        if deadline < created_at:
            raise ValueError("Deadline must not be before the request was created")
        self.email_prefix = validate_email_prefix(email_prefix)
        self.created_at = created_at
        self.deadline = deadline

    @classmethod
    def create(
        cls, email_prefix: str, poll_cfg: "MfaPollCfg", now: datetime | None = None
    ) -> "MfaExtractionRequest":
        created_at = now or datetime.now(UTC)
        return cls(
            email_prefix=email_prefix,
            created_at=created_at,
            deadline=created_at + timedelta(seconds=poll_cfg.total_wait),
        )

    def is_overdue(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) > self.deadline

    def __repr__(self) -> str:
        return f"MfaExtractionRequest(email_prefix={self.email_prefix!r}, deadline={self.deadline.isoformat()})"
