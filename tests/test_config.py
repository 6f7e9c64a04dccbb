from pathlib import Path
import pytest
from pydantic import ValidationError
from astronauts.config import AppConfig, load_app_config, load_yaml_config


def test_defaults():
	cfg = load_app_config(None)
	assert cfg == AppConfig()
	assert cfg.dataset is None
	assert cfg.log_format == "console"


def test_relative_dataset_resolves_against_config(tmp_path):
	p = tmp_path / "cfg.yaml"
	p.write_text("dataset: snapshots/astronauts.json\nlog_level: DEBUG\nlog_format: json\n", encoding="utf-8")
	cfg = load_app_config(p)
	assert cfg.dataset == tmp_path / "snapshots" / "astronauts.json"
	assert cfg.log_level == "DEBUG"
	assert cfg.log_format == "json"


def test_empty_yaml_is_empty_mapping(tmp_path):
	p = tmp_path / "empty.yaml"
	p.write_text("", encoding="utf-8")
	assert load_yaml_config(p) == {}
	assert load_app_config(p) == AppConfig()


def test_bad_log_format_rejected(tmp_path):
	p = tmp_path / "cfg.yaml"
	p.write_text("log_format: xml\n", encoding="utf-8")
	with pytest.raises(ValidationError):
		load_app_config(p)


def test_shipped_default_config():
	root = Path(__file__).resolve().parents[1]
	cfg = load_app_config(root / "configs" / "default.yaml")
	assert cfg.dataset is None


def test_unknown_log_level_rejected(tmp_path):
	p = tmp_path / "cfg.yaml"
	p.write_text("log_level: VERBOSE\n", encoding="utf-8")
	with pytest.raises(ValidationError):
		load_app_config(p)
