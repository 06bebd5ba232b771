import pytest
from pydantic import ValidationError

from gateway_xml.config import GatewayXMLSettings, get_settings


def test_defaults(monkeypatch):
    for name in ("GATEWAY_XML_LOG_LEVEL", "GATEWAY_XML_JSON_INDENT", "GATEWAY_XML_INPUT_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    settings = GatewayXMLSettings()
    assert settings.log_level == "INFO"
    assert settings.json_indent == 2
    assert settings.input_encoding == "utf-8"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GATEWAY_XML_LOG_LEVEL", " debug ")
    monkeypatch.setenv("GATEWAY_XML_JSON_INDENT", "4")
    settings = GatewayXMLSettings()
    assert settings.log_level == "DEBUG"
    assert settings.json_indent == 4


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("GATEWAY_XML_JSON_INDENT=0\n", encoding="utf-8")
    assert GatewayXMLSettings().json_indent == 0


def test_invalid_values_are_rejected(monkeypatch):
    monkeypatch.setenv("GATEWAY_XML_JSON_INDENT", "-1")
    with pytest.raises(ValidationError):
        GatewayXMLSettings()


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("GATEWAY_XML_JSON_INDENT", "8")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().json_indent == 8


def test_unknown_input_encoding_is_rejected(monkeypatch):
    monkeypatch.setenv("GATEWAY_XML_INPUT_ENCODING", "no-such-codec")
    with pytest.raises(ValidationError):
        GatewayXMLSettings()


def test_input_encoding_is_normalized(monkeypatch):
    monkeypatch.setenv("GATEWAY_XML_INPUT_ENCODING", "UTF8")
    assert GatewayXMLSettings().input_encoding == "utf-8"
