from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from common.logger import get_logger
from common.settings import settings

log = get_logger(__name__)


class AppConfig(BaseModel):
    title: str = "Agentic Ops Console"
    upload_types: tuple[str, ...] = (".txt", ".md", ".json", ".jsonl")


class BlueprintConfig(BaseModel):
    chunk_size: int = 600
    min_chunk_size: int = 200
    max_chunk_size: int = 1200
    chunk_size_step: int = 100
    keyword_limit: int = Field(default=5, ge=1)
    tokens_per_word: float = Field(default=1.3, gt=0)
    stable_ids: bool = True
    default_format: str = Field(default="json", pattern="^(json|jsonl)$")
    ir_filename: str = "instructional-ruleset.md"
    kcs_basename: str = "knowledge-compendium"

    @model_validator(mode="after")
    def _check_range(self) -> "BlueprintConfig":
        if not 0 < self.min_chunk_size <= self.max_chunk_size:
            raise ValueError("min_chunk_size must be positive and <= max_chunk_size")
        return self


class StorageConfig(BaseModel):
    blueprint_key: str = "agentic-blueprint:v1"
    tasks_key: str = "agentic-matrix:v1"


class GlobalYAMLConfig(BaseModel):
    app: AppConfig = Field(default_factory=AppConfig)
    blueprint: BlueprintConfig = Field(default_factory=BlueprintConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)


def load_yaml_config(path: Path = settings.config_path) -> GlobalYAMLConfig:
    if not Path(path).exists():
        log.warning("Config file %s not found, using defaults", path)
        return GlobalYAMLConfig()
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return GlobalYAMLConfig(**raw)


yaml_config = load_yaml_config()
