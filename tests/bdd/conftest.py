import pytest
from playwright.sync_api import sync_playwright

from obwizard import config
from obwizard.adapters.network_debugger import NetworkDebugger
from obwizard.logging import logging_setup


def pytest_collection_modifyitems(items):
    for item in items:
        if "bdd" in item.path.parts:
            item.add_marker(pytest.mark.e2e)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep the report of each phase on the item so fixtures can see whether the test failed"""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(scope="session", autouse=True)
def live_environment_only():
    """These journeys drive the hosted integration environment and a third party inbox"""
    if not config.e2e_enabled():
        pytest.skip("set RUN_E2E=true to run the browser journeys")
    logging_setup(config.get_log_level())


@pytest.fixture(scope="session")
def browser(live_environment_only, wizard_cfg):
    """Browser instance for all tests"""
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=wizard_cfg.headless, slow_mo=wizard_cfg.slow_mo_ms)
        yield browser
        browser.close()


@pytest.fixture(scope="function")
def context(browser, wizard_cfg):
    """Fresh context per scenario, the inbox tab shares it with the wizard"""
    context = browser.new_context(viewport=wizard_cfg.viewport.as_dict())
    context.set_default_timeout(wizard_cfg.default_timeout_ms)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context, request):
    """Fresh page for each test, with a screenshot and the html kept if the scenario fails"""
    page = context.new_page()
    network_debugger = NetworkDebugger(page)
    if config.network_debug_enabled():
        network_debugger.enable()

    yield page

    if network_debugger.enabled:
        network_debugger.log_summary()
        network_debugger.disable()
    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and not page.is_closed():
        artifacts = config.get_artifacts_path() / request.node.name
        artifacts.mkdir(parents=True, exist_ok=True)
        page.screenshot(path=str(artifacts / "failure.png"), full_page=True)
        (artifacts / "failure.html").write_text(page.content(), encoding="utf-8")
    page.close()
