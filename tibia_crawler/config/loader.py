"""Configuration loading helpers for tibia-crawler."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .models import CrawlerConfig

CONFIG_EXTENSIONS = (".yaml", ".yml", ".json")
CONFIG_FILENAME = "config.yaml"
HOME_ENV = "TIBIA_CRAWLER_HOME"
BASE_URL_ENV = "TIBIA_CRAWLER_BASE_URL"


def _read_file(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def _write_file(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as stream:
        if path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(payload, stream, allow_unicode=True, sort_keys=False)
        else:
            json.dump(payload, stream, indent=2, ensure_ascii=False)


@dataclass(slots=True)
class ConfigLocator:
    """Resolve the config file and log directory from the project home."""

    project_root: Path | None = None
    logs_dir: Path | None = None

    def __post_init__(self) -> None:
        env_root = os.environ.get(HOME_ENV)
        if env_root:
            root = Path(env_root).expanduser().resolve()
        else:
            root = (self.project_root or Path(__file__).resolve().parents[2]).resolve()
        self.project_root = root
        self.logs_dir = (root / "logs").resolve()

    def config_path(self) -> Path:
        for ext in CONFIG_EXTENSIONS:
            candidate = self.project_root / f"config{ext}"
            if candidate.exists():
                return candidate
        return self.project_root / CONFIG_FILENAME


class ConfigRepository:
    """Load the crawler configuration once and serve it from memory."""

    def __init__(self, locator: ConfigLocator | None = None) -> None:
        self.locator = locator or ConfigLocator()
        self._cache: CrawlerConfig | None = None

    def load(self) -> CrawlerConfig:
        if self._cache is not None:
            return self._cache
        path = self.locator.config_path()
        payload = _read_file(path) if path.exists() else {}
        base_url = os.environ.get(BASE_URL_ENV)
        if base_url:
            payload["base_url"] = base_url
        config = CrawlerConfig.model_validate(payload)
        self._cache = config
        return config

    def save(self, config: CrawlerConfig) -> Path:
        path = self.locator.config_path()
        _write_file(path, config.model_dump(mode="json"))
        self._cache = config
        return path

    def exists(self) -> bool:
        return self.locator.config_path().exists()


__all__ = [
    "BASE_URL_ENV",
    "CONFIG_EXTENSIONS",
    "ConfigLocator",
    "ConfigRepository",
    "HOME_ENV",
]
