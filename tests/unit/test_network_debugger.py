"""Unit tests for the network debugger."""

from unittest.mock import MagicMock

from obwizard.adapters.network_debugger import NetworkDebugger


def test_enable_attaches_and_disable_removes_listeners():
    page = MagicMock()
    debugger = NetworkDebugger(page)

    debugger.enable()
    debugger.enable()
    assert page.on.call_count == 4

    debugger.disable()
    assert page.remove_listener.call_count == 4
    assert {call.args[0] for call in page.remove_listener.call_args_list} == {
        "request",
        "response",
        "requestfailed",
        "console",
    }


def test_counts_events():
    page = MagicMock()
    debugger = NetworkDebugger(page)
    debugger.enable()
    handlers = {call.args[0]: call.args[1] for call in page.on.call_args_list}

    handlers["request"](MagicMock(method="GET", url="https://onboarding.example.com/welcome"))
    handlers["request"](MagicMock(method="POST", url="https://onboarding.example.com/api/signup"))
    handlers["response"](MagicMock(status=200, url="https://onboarding.example.com/welcome"))
    handlers["response"](MagicMock(status=500, status_text="Server Error", url="https://onboarding.example.com/api"))
    handlers["requestfailed"](MagicMock(url="https://onboarding.example.com/api", failure="net::ERR_FAILED"))
    handlers["console"](MagicMock(type="error", text="Uncaught TypeError"))
    handlers["console"](MagicMock(type="log", text="hello"))

    assert debugger.summary() == {"requests": 2, "responses": 2, "failures": 1, "console_errors": 1}
    debugger.log_summary()


def test_enable_resets_counts():
    page = MagicMock()
    debugger = NetworkDebugger(page)
    debugger.enable()
    debugger.stats.requests = 5
    debugger.disable()

    debugger.enable()

    assert debugger.summary()["requests"] == 0
