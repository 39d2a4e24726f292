# === FILE: contact_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера ContactScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Final, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from contact_scout.matcher.phrases import PhraseTable

MIN_PAGES: Final[int] = 1
MAX_PAGES: Final[int] = 25
DEFAULT_PAGES: Final[int] = 8
DEFAULT_USER_AGENT: Final[str] = "ContactScoutBot/1.0 (+contact affordance crawler)"
DEFAULT_ACCEPT: Final[str] = "text/html,application/xhtml+xml"


def clamp_max_pages(value: Any) -> int:
    """Приводит лимит страниц к диапазону [1, 25]; ``None`` → 8."""
    if value is None or value == "":
        return DEFAULT_PAGES
    if isinstance(value, bool):
        raise ValueError("max_pages must be an integer, got a bool")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"max_pages must be an integer, got {value!r}") from exc
    return max(MIN_PAGES, min(MAX_PAGES, number))


class CrawlerConfig(BaseModel):
    """Конфигурация краулера (общая для всех заданий одного запуска)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_pages: int = Field(DEFAULT_PAGES, description="Лимит страниц на одну цель, [1, 25].")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    accept: str = Field(DEFAULT_ACCEPT, min_length=1, description="Заголовок Accept.")
    extra_phrases: list[str] = Field(
        default_factory=list, description="Дополнительные контактные фразы (любой язык)."
    )
    extra_path_hints: list[str] = Field(
        default_factory=list, description="Дополнительные подсказки пути, например '/kontakt'."
    )

    @field_validator("max_pages", mode="before")
    @classmethod
    def _clamp_max_pages(cls, v: Any) -> int:
        return clamp_max_pages(v)

    def phrase_table(self) -> PhraseTable:
        """Таблица фраз по умолчанию, расширенная значениями из конфига."""
        return PhraseTable().extended(self.extra_phrases, self.extra_path_hints)


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlerConfig.
    Без пути использует configs/default.yaml, а при его отсутствии значения
    по умолчанию. Явно указанный, но отсутствующий файл → FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return CrawlerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return CrawlerConfig(**data)
