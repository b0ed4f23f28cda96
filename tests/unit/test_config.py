"""
Unit tests for ExtractorConfig loading.
"""
import json

from contact_extractor.config import ExtractorConfig


class TestExtractorConfig:

    def test_defaults(self):
        cfg = ExtractorConfig.default()
        assert cfg.engine_strict_email_enabled
        assert cfg.engine_link_scan_enabled
        assert cfg.engine_phone_enabled
        assert cfg.max_text_length == 1_000_000

    def test_feature_flags(self):
        cfg = ExtractorConfig(engine_phone_enabled=False)
        assert cfg.feature_flags() == {
            "engine_strict_email": True,
            "engine_link_scan": True,
            "engine_phone": False,
        }

    def test_from_env_without_variables(self, monkeypatch):
        for key in (
            "CONTACTS_CONFIG_FILE",
            "CONTACTS_MAX_TEXT_LENGTH",
            "CONTACTS_ENGINE_STRICT_EMAIL",
            "CONTACTS_ENGINE_LINK_SCAN",
            "CONTACTS_ENGINE_PHONE",
        ):
            monkeypatch.delenv(key, raising=False)
        assert ExtractorConfig.from_env() == ExtractorConfig()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.delenv("CONTACTS_CONFIG_FILE", raising=False)
        monkeypatch.setenv("CONTACTS_ENGINE_LINK_SCAN", "false")
        monkeypatch.setenv("CONTACTS_ENGINE_PHONE", "no")
        monkeypatch.setenv("CONTACTS_MAX_TEXT_LENGTH", "500")
        cfg = ExtractorConfig.from_env()
        assert cfg.engine_link_scan_enabled is False
        assert cfg.engine_phone_enabled is False
        assert cfg.engine_strict_email_enabled is True
        assert cfg.max_text_length == 500

    def test_unparseable_values_ignored(self, monkeypatch):
        monkeypatch.delenv("CONTACTS_CONFIG_FILE", raising=False)
        monkeypatch.setenv("CONTACTS_ENGINE_PHONE", "maybe")
        monkeypatch.setenv("CONTACTS_MAX_TEXT_LENGTH", "lots")
        cfg = ExtractorConfig.from_env()
        assert cfg.engine_phone_enabled is True
        assert cfg.max_text_length == 1_000_000

    def test_config_file(self, monkeypatch, tmp_path):
        path = tmp_path / "contacts.json"
        path.write_text(
            json.dumps({"engine_link_scan_enabled": False, "max_text_length": 10, "unknown": 1}),
            encoding="utf-8",
        )
        monkeypatch.setenv("CONTACTS_CONFIG_FILE", str(path))
        monkeypatch.delenv("CONTACTS_MAX_TEXT_LENGTH", raising=False)
        monkeypatch.delenv("CONTACTS_ENGINE_LINK_SCAN", raising=False)
        cfg = ExtractorConfig.from_env()
        assert cfg.engine_link_scan_enabled is False
        assert cfg.max_text_length == 10

    def test_env_wins_over_config_file(self, monkeypatch, tmp_path):
        path = tmp_path / "contacts.json"
        path.write_text(json.dumps({"max_text_length": 10}), encoding="utf-8")
        monkeypatch.setenv("CONTACTS_CONFIG_FILE", str(path))
        monkeypatch.setenv("CONTACTS_MAX_TEXT_LENGTH", "20")
        assert ExtractorConfig.from_env().max_text_length == 20

    def test_broken_config_file_falls_back(self, monkeypatch, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        monkeypatch.setenv("CONTACTS_CONFIG_FILE", str(path))
        monkeypatch.delenv("CONTACTS_MAX_TEXT_LENGTH", raising=False)
        assert ExtractorConfig.from_env().max_text_length == 1_000_000

    def test_config_file_string_values_coerced(self, monkeypatch, tmp_path):
        path = tmp_path / "contacts.json"
        path.write_text(
            json.dumps({"engine_phone_enabled": "false", "engine_link_scan_enabled": "yes", "max_text_length": "25"}),
            encoding="utf-8",
        )
        monkeypatch.setenv("CONTACTS_CONFIG_FILE", str(path))
        for key in ("CONTACTS_MAX_TEXT_LENGTH", "CONTACTS_ENGINE_PHONE", "CONTACTS_ENGINE_LINK_SCAN"):
            monkeypatch.delenv(key, raising=False)
        cfg = ExtractorConfig.from_env()
        assert cfg.engine_phone_enabled is False
        assert cfg.engine_link_scan_enabled is True
        assert cfg.max_text_length == 25

    def test_config_file_invalid_values_keep_defaults(self, monkeypatch, tmp_path):
        path = tmp_path / "contacts.json"
        path.write_text(
            json.dumps({
                "engine_phone_enabled": "maybe",
                "engine_strict_email_enabled": 0,
                "max_text_length": True,
                "engine_link_scan_enabled": False,
            }),
            encoding="utf-8",
        )
        monkeypatch.setenv("CONTACTS_CONFIG_FILE", str(path))
        for key in (
            "CONTACTS_MAX_TEXT_LENGTH",
            "CONTACTS_ENGINE_PHONE",
            "CONTACTS_ENGINE_STRICT_EMAIL",
            "CONTACTS_ENGINE_LINK_SCAN",
        ):
            monkeypatch.delenv(key, raising=False)
        cfg = ExtractorConfig.from_env()
        assert cfg.engine_phone_enabled is True
        assert cfg.engine_strict_email_enabled is True
        assert cfg.max_text_length == 1_000_000
        assert cfg.engine_link_scan_enabled is False

    def test_config_file_invalid_values_do_not_disable_engines(self, monkeypatch, tmp_path):
        path = tmp_path / "contacts.json"
        path.write_text(json.dumps({"engine_phone_enabled": "false-ish"}), encoding="utf-8")
        monkeypatch.setenv("CONTACTS_CONFIG_FILE", str(path))
        monkeypatch.delenv("CONTACTS_ENGINE_PHONE", raising=False)
        cfg = ExtractorConfig.from_env()
        assert cfg.feature_flags()["engine_phone"] is True

    def test_config_file_not_an_object_falls_back(self, monkeypatch, tmp_path):
        path = tmp_path / "contacts.json"
        path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        monkeypatch.setenv("CONTACTS_CONFIG_FILE", str(path))
        monkeypatch.delenv("CONTACTS_MAX_TEXT_LENGTH", raising=False)
        assert ExtractorConfig.from_env() == ExtractorConfig()
