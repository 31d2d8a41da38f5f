import json
import sys
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT, ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from deeplx.core.config import get_settings
from tests.backend_fakes import FakeBackend, deepl_reply


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def echo_backend() -> FakeBackend:
    """Answers every request with ``[<target>] <text>``."""

    def handler(request: httpx.Request) -> httpx.Response:
        params = json.loads(request.content)["params"]
        text = params["texts"][0]["text"]
        target = params["lang"]["target_lang"]
        return httpx.Response(200, json=deepl_reply(f"[{target}] {text}"))

    return FakeBackend(handler)
