import json

import pytest

from newsdesk.config import Config


class TestConfig:
    def test_defaults(self, monkeypatch):
        for var in (
            "NEWSDESK_API_URL",
            "NEWSDESK_TIMEOUT",
            "NEWSDESK_MAX_RETRIES",
            "NEWSDESK_CSRF_COOKIE",
            "NEWSDESK_CSRF_HEADER",
            "NEWSDESK_REFRESH_PATH",
        ):
            monkeypatch.delenv(var, raising=False)

        config = Config()

        assert config.endpoint == "http://localhost:8000"
        assert config.timeout == 30
        assert config.max_retries == 0
        assert config.csrf_cookie_name == "csrftoken"
        assert config.csrf_header_name == "X-CSRF-Token"
        assert config.refresh_path == "/auth/token/refresh/"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("NEWSDESK_API_URL", "https://api.example.com/")
        monkeypatch.setenv("NEWSDESK_TIMEOUT", "12")
        monkeypatch.setenv("NEWSDESK_CSRF_HEADER", "X-CSRFToken")

        config = Config()

        assert config.endpoint == "https://api.example.com"
        assert config.timeout == 12
        assert config.csrf_header_name == "X-CSRFToken"

    def test_unparseable_int_falls_back(self, monkeypatch):
        monkeypatch.setenv("NEWSDESK_TIMEOUT", "soon")

        assert Config().timeout == 30

    def test_configure(self):
        config = Config()

        config.configure(endpoint="https://x.example.com/", timeout=3, max_retries=2, log_level="DEBUG")

        assert config.endpoint == "https://x.example.com"
        assert config.timeout == 3
        assert config.max_retries == 2
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("kwargs", [{"timeout": 0}, {"max_retries": -1}])
    def test_configure_rejects_invalid(self, kwargs):
        with pytest.raises(ValueError):
            Config().configure(**kwargs)

    def test_json(self):
        config = Config()
        config.configure(endpoint="https://x.example.com")

        assert json.loads(config.json())["endpoint"] == "https://x.example.com"
