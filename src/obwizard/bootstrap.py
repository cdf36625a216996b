"""ABOUTME: Wires the inbox, the MFA debug log and the poll settings together
ABOUTME: Gives wizard steps a single callable that turns an email prefix into a code"""

import time
from collections.abc import Callable

from playwright.sync_api import BrowserContext

from obwizard import config
from obwizard.adapters.inbox import AbstractInbox, MailForSpamInbox
from obwizard.adapters.mfa_log import AbstractMfaLog, FileMfaLog
from obwizard.service_layer.mfa_service import fetch_mfa_code

MfaCodeFetcher = Callable[[str], str]


def bootstrap(
    context: BrowserContext,
    poll_cfg: config.MfaPollCfg | None = None,
    inbox: AbstractInbox | Callable[[], AbstractInbox] | None = None,
    mfa_log: AbstractMfaLog | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> MfaCodeFetcher:
    """Build the code fetcher used by the email verification step.

    A fresh inbox tab is used for each fetch. A ready-made `inbox` is opened again
    for every fetch, so it has to support open after close.
    """
    poll_cfg = poll_cfg or config.MfaPollCfg.from_env()
    mfa_log = mfa_log or FileMfaLog(config.MfaLogCfg.from_env().path)

    if inbox is None:
        inbox_cfg = config.InboxCfg.from_env()

        def inbox_factory() -> AbstractInbox:
            return MailForSpamInbox(context, inbox_cfg, render_delay=poll_cfg.render_delay)

    elif isinstance(inbox, AbstractInbox):
        ready_inbox = inbox

        def inbox_factory() -> AbstractInbox:
            return ready_inbox

    else:
        inbox_factory = inbox

    def fetch(email_prefix: str) -> str:
        return fetch_mfa_code(inbox_factory(), email_prefix, poll_cfg=poll_cfg, mfa_log=mfa_log, sleep=sleep)

    return fetch
