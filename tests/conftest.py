import pytest

import rating_engine.engine.service as service_mod


@pytest.fixture(autouse=True)
def _fresh_service(monkeypatch):
    monkeypatch.delenv("RATE_TABLE_PATH", raising=False)
    monkeypatch.setattr(service_mod, "_CACHED_SERVICE", None)
    yield
