from playwright.sync_api import Page

from obwizard.adapters.locators import first_visible
from obwizard.config import WizardCfg
from obwizard.domain.mfa import CODE_LENGTH, is_valid_code
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.base import WizardPage


class EmailVerificationPage(WizardPage):
    step = WizardStep.EMAIL_VERIFICATION

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.code_input = self.page.locator("#MFA_OTP")
        # older releases render one box per digit
        self.char_inputs = [self.page.locator(f"#char-input-{index}") for index in range(CODE_LENGTH)]
        self.resend_code_button = self.page.locator("#getNewCodeButton")
        self.heading = self.page.get_by_role("heading", name="Verify Your Email Address")
        self.code_error = self.page.locator("#MFA_OTP-error")
        self.email_display = self.page.locator('p:has-text("@mailforspam.com")')

    def enter_code(self, code: str) -> None:
        """Type the code into whichever code field this release renders."""
        if not is_valid_code(code):
            raise ValueError(f"Verification code must be {CODE_LENGTH} digits, got '{code}'")
        first_visible([self.code_input, self.char_inputs[0]], timeout_ms=self.cfg.default_timeout_ms)
        if self.code_input.first.is_visible():
            self.code_input.fill(code)
            return
        for box, digit in zip(self.char_inputs, code, strict=True):
            box.fill(digit)

    def request_new_code(self, timeout_ms: float = 45_000) -> None:
        # the button only shows up 30 seconds after the first code was sent
        self.resend_code_button.click(timeout=timeout_ms)
