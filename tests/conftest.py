import pathlib
import pytest

import fox.common.http_client as http_client


# ----------------------------
#  Auto-mark tests by folder
# ----------------------------

def pytest_collection_modifyitems(config, items):
    for item in items:
        p = pathlib.Path(str(item.fspath)).as_posix()
        if "/tests/unit/" in p:
            item.add_marker(pytest.mark.unit)
        elif "/tests/component/" in p:
            item.add_marker(pytest.mark.component)
        elif "/tests/e2e/" in p:
            item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def reset_http_session_singleton():
    http_client._SESSIONS.clear()


@pytest.fixture(autouse=True)
def isolate_api_env(monkeypatch):
    """Keep a developer's local HTTP/API overrides out of unit tests."""
    for var in (
        "FOX_API_SCHEME",
        "FOX_API_HOST",
        "FOX_HTTP_TIMEOUT_S",
        "HTTP_POOL_CONN",
        "HTTP_POOL_MAX",
        "TIMING_SLOW_THRESHOLD_MS",
    ):
        monkeypatch.delenv(var, raising=False)
