"""ABOUTME: Browser end-to-end suite for the account-opening onboarding wizard
ABOUTME: Page objects, per-step wizard actions and the email MFA code poller"""

__version__ = "0.1.0"
