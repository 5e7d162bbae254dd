"""
Configuration management for uri-utils.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EXTRACT_SCHEMES = [
    "http",
    "https",
    "ftp",
    "ftps",
    "sftp",
    "file",
    "ws",
    "wss",
    "ssh",
    "git",
    "svn",
    "telnet",
    "ldap",
    "ldaps",
    "rtsp",
    "gopher",
    "nntp",
    "irc",
]

DEFAULT_PORTS = {
    "http": "80",
    "https": "443",
    "ftp": "21",
    "ftps": "990",
    "sftp": "22",
    "ssh": "22",
    "ws": "80",
    "wss": "443",
    "git": "9418",
    "svn": "3690",
    "telnet": "23",
    "ldap": "389",
    "ldaps": "636",
    "rtsp": "554",
    "gopher": "70",
    "nntp": "119",
    "irc": "194",
}


class ParserConfig(BaseSettings):
    """Configuration for parsing, normalization and extraction."""

    extract_schemes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTRACT_SCHEMES),
        description="Schemes recognised by the text extractor (case-insensitive)",
    )
    default_ports: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_PORTS),
        description="Well-known default port per scheme, as digit strings",
    )
    strip_default_port: bool = Field(
        default=False,
        description="Drop the port during normalization when it equals the scheme default",
    )

    model_config = SettingsConfigDict(env_prefix="URI_")


class ApiConfig(BaseSettings):
    """Configuration for the HTTP API."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    max_text_length: int = Field(
        default=1_000_000,
        description="Largest text accepted by the extract endpoint (characters)",
    )

    model_config = SettingsConfigDict(env_prefix="API_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    parser: ParserConfig = Field(default_factory=ParserConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    # Global settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
