"""Configuration loader: YAML files + environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from catalogtext.core.models import DEFAULT_FALLBACK_TEXT, AppConfig


def _find_project_root() -> Path:
    """Walk up from cwd to find a directory containing pyproject.toml."""
    cwd = Path.cwd()
    for p in [cwd, *cwd.parents]:
        if (p / "pyproject.toml").exists():
            return p
    return cwd


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML + environment variables.

    Priority: env vars > .env file > YAML defaults.
    """
    root = _find_project_root()
    load_dotenv(root / ".env")

    yaml_path = Path(config_path) if config_path else root / "config" / "default.yaml"
    yaml_data: dict = {}
    if yaml_path.exists():
        with open(yaml_path) as f:
            yaml_data = yaml.safe_load(f) or {}

    render_data = yaml_data.get("render", {})

    return AppConfig(
        fallback_text=os.getenv(
            "CATALOGTEXT_FALLBACK_TEXT", render_data.get("fallback_text", DEFAULT_FALLBACK_TEXT)
        ),
        excerpt_length=int(os.getenv("CATALOGTEXT_EXCERPT_LENGTH", render_data.get("excerpt_length", 300))),
        log_level=os.getenv("CATALOGTEXT_LOG_LEVEL", yaml_data.get("log_level", "WARNING")).upper(),
    )


def configure_logging(config: AppConfig) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
