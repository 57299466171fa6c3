"""Configuration loader for the responder."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .parsing import FALLBACK_RESPONSE

DEFAULT_CONFIG_PATH = "config/responder.defaults.yml"


@dataclass(frozen=True)
class ResponderConfig:
    responses_path: Path
    defaults_path: Path
    defaults_encoding: str
    fallback_response: str
    prompt: str
    welcome_message: str
    goodbye_message: str
    exit_words: Tuple[str, ...]
    random_seed: Optional[int]
    log_level: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> "ResponderConfig":
        files = data.get("files", {})
        seed = data.get("random_seed")
        exit_words = data.get("exit_words", ["bye"])
        if isinstance(exit_words, str):
            exit_words = [exit_words]
        return cls(
            responses_path=_resolve(files.get("responses", "responses.txt"), base_dir),
            defaults_path=_resolve(files.get("defaults", "default.txt"), base_dir),
            defaults_encoding=str(files.get("defaults_encoding", "ascii")),
            fallback_response=str(data.get("fallback_response", FALLBACK_RESPONSE)),
            prompt=str(data.get("prompt", "> ")),
            welcome_message=str(data.get("welcome_message", "Welcome. Type 'bye' to leave.")),
            goodbye_message=str(data.get("goodbye_message", "Nice talking to you. Bye...")),
            exit_words=tuple(str(word).lower() for word in exit_words),
            random_seed=int(seed) if seed is not None else None,
            log_level=str(data.get("log_level", "WARNING")).upper(),
        )


def _resolve(raw: str, base_dir: Optional[Path]) -> Path:
    path = Path(raw)
    if base_dir is not None and not path.is_absolute():
        return base_dir / path
    return path


ENV_MAP = {
    "files.responses": "RESPONDER_RESPONSES_PATH",
    "files.defaults": "RESPONDER_DEFAULTS_PATH",
    "random_seed": "RESPONDER_RANDOM_SEED",
    "log_level": "RESPONDER_LOG_LEVEL",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for dotted_key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        target = merged
        parts = dotted_key.split(".")
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        last = parts[-1]
        if last == "random_seed":
            value = int(value)
        target[last] = value

    return merged


def load_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> ResponderConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return ResponderConfig.from_dict(data, base_dir=path.parent)
