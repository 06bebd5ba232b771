import codecs
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewayXMLSettings(BaseSettings):
    """Configuration for logging and the command-line front end, read from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    log_level: str = Field(default="INFO", alias="GATEWAY_XML_LOG_LEVEL")
    json_indent: int = Field(default=2, ge=0, alias="GATEWAY_XML_JSON_INDENT")
    input_encoding: str = Field(default="utf-8", alias="GATEWAY_XML_INPUT_ENCODING")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @field_validator("input_encoding")
    @classmethod
    def check_input_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"unknown encoding {value!r}") from exc


@lru_cache(maxsize=1)
def get_settings() -> GatewayXMLSettings:
    return GatewayXMLSettings()
