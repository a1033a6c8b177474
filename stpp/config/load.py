"""
Загрузчик конфигурации препроцессора из YAML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import ConfigLoadError, PreprocessorConfig

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Читает YAML файл и возвращает словарь."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Failed to read config {path}: {e}") from e
    try:
        raw = _yaml.load(text) or {}
    except YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"YAML must be a mapping: {path}")
    return raw


def load_config(path: Optional[Path]) -> PreprocessorConfig:
    """
    Загружает конфигурацию из файла.

    Args:
        path: Путь к YAML-файлу или None (конфигурация по умолчанию)

    Returns:
        Конфигурация препроцессора
    """
    if path is None:
        return PreprocessorConfig()
    if not path.is_file():
        raise ConfigLoadError(f"Config file not found: {path}")
    return PreprocessorConfig.from_dict(_read_yaml_map(path), origin=str(path))


__all__ = ["load_config"]
