import codecs
import json
import os
from dataclasses import dataclass

from wordcount.errors import ConfigError

CONFIG_ENV_VAR = "WORDCOUNT_CONFIG_JSON"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class WordCountConfig:
    encoding: str = "utf-8"
    log_level: str = "WARNING"


def _parse_json(raw: str) -> dict:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{CONFIG_ENV_VAR} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_ENV_VAR} must be a JSON object")
    return data


def check_encoding(name: str) -> str:
    """
    Make sure `name` is a text encoding whose newline is the single byte "\\n",
    so files can be split into lines before decoding.
    Rejects unknown names, bytes-to-bytes codecs like rot13 or hex, and
    multi-byte encodings such as utf-16 and utf-32.
    """
    try:
        codecs.lookup(name)
    except LookupError as e:
        raise ConfigError(f"unknown encoding '{name}'") from e

    try:
        newline = b"\n".decode(name)
    except LookupError as e:
        raise ConfigError(f"'{name}' is not a text encoding") from e
    except UnicodeDecodeError:
        newline = None
    if newline != "\n":
        raise ConfigError(f"encoding '{name}' cannot be read line by line")
    return name


def _require_encoding(value) -> str:
    return check_encoding(str(value).strip())


def _require_log_level(value) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        allowed = ", ".join(LOG_LEVELS)
        raise ConfigError(
            f"unknown log_level '{value}' in {CONFIG_ENV_VAR}. Allowed: {allowed}"
        )
    return level


def load_config() -> WordCountConfig:
    """
    Read settings from the WORDCOUNT_CONFIG_JSON environment variable.
    A missing or blank variable gives the defaults.
    """
    raw = (os.getenv(CONFIG_ENV_VAR) or "").strip()
    if not raw:
        return WordCountConfig()

    data = _parse_json(raw)
    defaults = WordCountConfig()
    return WordCountConfig(
        encoding=_require_encoding(data.get("encoding") or defaults.encoding),
        log_level=_require_log_level(data.get("log_level") or defaults.log_level),
    )
