"""ABOUTME: Custom exceptions for the wizard suite
ABOUTME: Browser failures are translated into these at the adapter boundary"""


class ObWizardError(Exception):
    """Base exception for all our custom errors."""


class ServiceLayerError(ObWizardError):
    """Base exception for all service layer errors."""


class FatalSetupError(ServiceLayerError):
    """Raised when the inbox tab cannot be opened, navigated or searched, so polling cannot start."""

    def __init__(self, step: str = "", reason: str = "") -> None:
        if step and reason:
            message = f"Inbox setup failed while trying to {step}: {reason}"
        elif step:
            message = f"Inbox setup failed while trying to {step}"
        else:
            message = "Inbox setup failed"
        super().__init__(message)
        self.step = step
        self.reason = reason


class CodeNotFound(ServiceLayerError):
    """Raised when every poll of the inbox finished without a verification code."""

    def __init__(self, email_prefix: str = "", attempts: int = 0) -> None:
        if email_prefix:
            message = f"No verification code found for '{email_prefix}' after {attempts} attempts"
        else:
            message = f"No verification code found after {attempts} attempts"
        super().__init__(message)
        self.email_prefix = email_prefix
        self.attempts = attempts


class LogWriteFailure(ObWizardError):
    """Raised when the MFA debug log cannot be written. Never escapes the poller."""


class ElementNotResolved(ObWizardError):
    """Raised when none of an ordered list of candidate locators becomes visible."""

    def __init__(self, candidates: list[str] | None = None, timeout_ms: float = 0) -> None:
        candidates = candidates or []
        message = f"None of {len(candidates)} candidates became visible within {timeout_ms:g}ms"
        if candidates:
            message += ": " + ", ".join(candidates)
        super().__init__(message)
        self.candidates = candidates
        self.timeout_ms = timeout_ms


class StepNotReached(ServiceLayerError):
    """Raised when the wizard did not arrive at the expected step."""

    def __init__(self, step: str, url: str = "") -> None:
        message = f"Expected to reach wizard step '{step}'"
        if url:
            message += f" but the browser is at '{url}'"
        super().__init__(message)
        self.step = step
        self.url = url
