from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Protocol, Sequence, Tuple
from pydantic import ValidationError
from ..logging import get_logger
from .astronaut_schema import Astronaut, AstronautsFile

log = get_logger(__name__)


class DatasetLoadError(RuntimeError):
	"""The astronaut snapshot could not be read or did not validate."""


def default_snapshot_path() -> Path:
	return Path(__file__).resolve().parents[1] / "data" / "astronauts.json"


def load_json(path: str | Path) -> Dict[str, Any]:
	p = Path(path)
	with p.open("r", encoding="utf-8") as f:
		return json.load(f)


def load_astronauts(path: str | Path) -> Tuple[Astronaut, ...]:
	p = Path(path)
	try:
		data = load_json(p)
		snapshot = AstronautsFile(**data)
	except (OSError, ValueError, TypeError, ValidationError) as exc:
		log.error("snapshot_load_failed", path=str(p), error=str(exc))
		raise DatasetLoadError(f"Failed to load astronauts from {p}") from exc
	log.info("snapshot_loaded", path=str(p), count=len(snapshot.astronauts))
	return tuple(snapshot.astronauts)


class AstronautProvider(Protocol):
	def get_astronauts(self) -> Sequence[Astronaut]: ...


class SnapshotProvider:
	"""Loads a JSON snapshot on first use and hands out the same tuple afterwards."""

	def __init__(self, path: Optional[str | Path] = None):
		self.path = Path(path) if path is not None else default_snapshot_path()
		self._astronauts: Optional[Tuple[Astronaut, ...]] = None

	def get_astronauts(self) -> Tuple[Astronaut, ...]:
		if self._astronauts is None:
			self._astronauts = load_astronauts(self.path)
		return self._astronauts


class StaticProvider:
	def __init__(self, astronauts: Iterable[Astronaut]):
		self._astronauts = tuple(astronauts)

	def get_astronauts(self) -> Tuple[Astronaut, ...]:
		return self._astronauts
