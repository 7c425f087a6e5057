"""Tests for Settings parsing helpers."""
from app.config import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.get_locales_list() == ["ko", "en"]
        assert s.default_locale == "ko"
        assert s.sanitizer_backend == "nh3"
        assert s.history_file_path == "data/history.json"
        assert s.is_production is False

    def test_comma_lists_are_trimmed(self):
        s = Settings(_env_file=None, locales=" ko , en, ja ,", cors_origins="https://a.example, https://b.example")
        assert s.get_locales_list() == ["ko", "en", "ja"]
        assert s.get_cors_origins_list() == ["https://a.example", "https://b.example"]

    def test_mail_enabled_needs_host_and_sender(self):
        assert Settings(_env_file=None, mail_host="smtp.example.com").is_mail_enabled is False
        assert Settings(_env_file=None, mail_host="smtp.example.com", mail_from="site@example.com").is_mail_enabled is True

    def test_environment_variables_are_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LOCALE", "en")
        monkeypatch.setenv("Sanitizer_Backend", "bleach")
        s = Settings(_env_file=None)
        assert s.default_locale == "en"
        assert s.sanitizer_backend == "bleach"
