import pytest

from resend_sdk.client import API_KEY_ENV
from resend_sdk.config import BASE_URL_ENV, USER_AGENT_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (API_KEY_ENV, BASE_URL_ENV, USER_AGENT_ENV):
        monkeypatch.delenv(name, raising=False)
