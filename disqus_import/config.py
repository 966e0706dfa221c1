"""Configuration loading from YAML and environment.

Every section has defaults, so the importer runs without a config file.
String values of the form ${VAR} or $VAR are replaced from the environment.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INCLUDES_URL = "https://raw.githubusercontent.com/damieng/jekyll-blog-comments/master/jekyll/_includes"
DEFAULT_INCLUDE_FILES = ["comment-new.html", "comment.html", "comments.html"]


class IncludesConfig(BaseSettings):
    """Jekyll include templates fetched before the import."""

    model_config = SettingsConfigDict(env_prefix="INCLUDES_", extra="ignore")

    enabled: bool = Field(default=True, description="Fetch and write the include templates")
    base_url: str = Field(default=DEFAULT_INCLUDES_URL, description="Location the templates are fetched from")
    files: list[str] = Field(default_factory=lambda: list(DEFAULT_INCLUDE_FILES), description="Template file names")
    timeout: int = Field(default=30, ge=1, description="HTTP timeout in seconds")


class OutputConfig(BaseSettings):
    """Layout of the Jekyll site written to."""

    model_config = SettingsConfigDict(env_prefix="OUTPUT_", extra="ignore")

    comments_dir: str = Field(default="_data/comments", description="Comment data dir, relative to the site")
    includes_dir: str = Field(default="_includes", description="Includes dir, relative to the site")
    progress: bool = Field(default=True, description="Print a transient line per written file")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    includes: IncludesConfig = Field(default_factory=IncludesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _substitute_env(value: Any, env: dict[str, str]) -> Any:
    """Replace ${VAR} and $VAR in strings with values from env."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            return env.get(value[2:-1].strip(), value)
        if value.startswith("$"):
            return env.get(value[1:].strip(), value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v, env) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file yields the defaults (still overridable by env, e.g.
    INCLUDES_ENABLED=false).
    """
    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    raw = _substitute_env(raw, dict(os.environ))

    return AppConfig(
        includes=IncludesConfig(**(raw.get("includes") or {})),
        output=OutputConfig(**(raw.get("output") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
