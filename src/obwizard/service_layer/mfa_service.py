"""ABOUTME: Service for reading the email verification code out of a disposable inbox
ABOUTME: Polls the inbox at a fixed interval until the code shows up or the attempts run out"""

import time
from collections.abc import Callable
from datetime import UTC, datetime

import structlog
from structlog.contextvars import bound_contextvars
from tenacity import RetryCallState, RetryError, Retrying, retry_if_result, stop_after_attempt, wait_fixed

from obwizard.adapters.inbox import AbstractInbox
from obwizard.adapters.mfa_log import AbstractMfaLog
from obwizard.config import MfaPollCfg
from obwizard.domain.mfa import MfaExtractionRequest
from obwizard.service_layer.exceptions import CodeNotFound, LogWriteFailure

log = structlog.get_logger(__name__)


def _no_code_yet(code: str | None) -> bool:
    return code is None


def _log_no_code_yet(retry_state: RetryCallState) -> None:
    log.info(
        "No verification code yet",
        attempt=retry_state.attempt_number,
        next_wait_seconds=retry_state.next_action.sleep if retry_state.next_action else None,
    )


def fetch_mfa_code(
    inbox: AbstractInbox,
    email_prefix: str,
    poll_cfg: MfaPollCfg | None = None,
    mfa_log: AbstractMfaLog | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> str:
    """Read the verification code that was emailed to `email_prefix`.

    Opens and searches the inbox, waits for delivery, then polls it. The inbox is
    closed on every way out, once it has been opened.

    Args:
        inbox: Where the email is delivered
        email_prefix: The part of the address before the @
        poll_cfg: Delays and the retry bound. Defaults are 3s, then every 2s, 20 retries
        mfa_log: Optional debug log, one line per code found
        sleep: Used for every wait, so tests can run without waiting

    Returns:
        The 6 digit code

    Raises:
        ValueError: if the email prefix is not usable
        FatalSetupError: if the inbox could not be opened or searched
        CodeNotFound: if no attempt found a code
    """
    poll_cfg = poll_cfg or MfaPollCfg()
    request = MfaExtractionRequest.create(email_prefix, poll_cfg)

    with bound_contextvars(email_prefix=request.email_prefix):
        log.info("Fetching verification code", deadline=request.deadline.isoformat())
        try:
            inbox.open()
            inbox.search(request.email_prefix)
            sleep(poll_cfg.initial_delay)
            code = _poll(inbox, request, poll_cfg, sleep)
        finally:
            inbox.close()

        log.info("Verification code found", code=code)
        if mfa_log is not None:
            try:
                mfa_log.record(request.email_prefix, code, datetime.now(UTC))
            except LogWriteFailure as error:
                log.warning("Could not record verification code", error=str(error))
            except Exception:
                log.exception("Unexpected error recording verification code")
        return code


def _poll(
    inbox: AbstractInbox,
    request: MfaExtractionRequest,
    poll_cfg: MfaPollCfg,
    sleep: Callable[[float], None],
) -> str:
    retrying = Retrying(
        stop=stop_after_attempt(poll_cfg.max_attempts),
        wait=wait_fixed(poll_cfg.interval),
        retry=retry_if_result(_no_code_yet),
        before_sleep=_log_no_code_yet,
        sleep=sleep,
    )
    try:
        code: str = retrying(inbox.find_code)
    except RetryError as error:
        attempts = error.last_attempt.attempt_number
        log.error("Gave up waiting for verification code", attempts=attempts)
        raise CodeNotFound(request.email_prefix, attempts) from None
    return code
