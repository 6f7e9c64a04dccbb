from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Literal, Optional
import yaml
from pydantic import BaseModel


class AppConfig(BaseModel):
	dataset: Optional[Path] = None
	log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
	log_format: Literal["console", "json"] = "console"


def load_yaml_config(path: str | Path) -> Dict[str, Any]:
	p = Path(path)
	with p.open("r", encoding="utf-8") as f:
		cfg = yaml.safe_load(f)
	return cfg or {}


def load_app_config(path: Optional[str | Path] = None) -> AppConfig:
	if path is None:
		return AppConfig()
	p = Path(path)
	cfg = AppConfig(**load_yaml_config(p))
	# dataset paths in the file are relative to the file itself
	if cfg.dataset is not None and not cfg.dataset.is_absolute():
		cfg = cfg.model_copy(update={"dataset": p.parent / cfg.dataset})
	return cfg
