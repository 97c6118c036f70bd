import os
import threading

import pytest

from loginpage.server import build_server
from loginpage.smoke import chromium_installed


@pytest.fixture(scope="session")
def live_server():
    httpd = build_server("127.0.0.1", 0)
    threading.Thread(target=httpd.serve_forever, daemon=True).start()
    yield httpd
    httpd.shutdown()
    httpd.server_close()


@pytest.fixture(scope="session")
def base_url(live_server):
    host, port = live_server.server_address[:2]
    return f"http://{host}:{port}"


@pytest.fixture(scope="session")
def chromium():
    """
    Gate for browser tests. They skip when Playwright has no Chromium build,
    unless REQUIRE_BROWSER is set (as in CI), where a missing browser fails.
    """
    if chromium_installed():
        return
    message = "Chromium is not installed for Playwright (run `playwright install chromium`)"
    if os.getenv("REQUIRE_BROWSER", "").lower() in ("1", "true", "yes"):
        pytest.fail(message)
    pytest.skip(message)
