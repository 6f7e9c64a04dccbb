"""
Queries over the astronaut collection.

Every function takes the full collection and never mutates it. Where several
records tie on the selection key, the one that comes first in the collection
wins.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, TextIO
from ..records.astronaut_schema import Astronaut, Month
from ..records.loaders import AstronautProvider

YOUNGEST_LIMIT = 10
AMERICAN = "American"
NASA = "NASA"
COLONEL = "colonel"


def first_ten_youngest_living_astronauts(astronauts: Sequence[Astronaut]) -> List[Astronaut]:
	living = [a for a in astronauts if a.date_of_death is None]
	# sorted() is stable with reverse=True, equal birth dates keep collection order
	living = sorted(living, key=lambda a: a.date_of_birth, reverse=True)
	return living[:YOUNGEST_LIMIT]


def format_name_and_birth_date(astronaut: Astronaut) -> str:
	return f"{astronaut.name}: {astronaut.date_of_birth.isoformat()}"


def print_first_ten_youngest_living_astronauts(astronauts: Sequence[Astronaut], file: Optional[TextIO] = None) -> None:
	for a in first_ten_youngest_living_astronauts(astronauts):
		print(format_name_and_birth_date(a), file=file)


def sum_of_flights_for_american_astronauts(astronauts: Sequence[Astronaut]) -> int:
	return sum(a.number_of_flights for a in astronauts if a.nationality == AMERICAN)


def shortest_nasa_bio_containing_colonel(astronauts: Sequence[Astronaut]) -> Optional[str]:
	bios = [a.bio for a in astronauts if a.agency == NASA and COLONEL in a.bio.lower()]
	# min() keeps the first of equally short bios
	return min(bios, key=len, default=None)


def number_of_astronauts_by_month_of_death(astronauts: Sequence[Astronaut]) -> Dict[Month, int]:
	counts: Dict[Month, int] = {}
	for a in astronauts:
		if a.date_of_death is None:
			continue
		month = Month.of(a.date_of_death)
		counts[month] = counts.get(month, 0) + 1
	return dict(sorted(counts.items()))


def _word_count(name: str) -> int:
	# Literal single-space split: "A  B" is three words
	return len(name.split(" "))


def name_with_the_most_words(astronauts: Sequence[Astronaut]) -> Optional[str]:
	best = max(astronauts, key=lambda a: _word_count(a.name), default=None)
	return best.name if best is not None else None


class AstronautManager:
	"""Runs the queries against whatever collection the provider supplies."""

	def __init__(self, provider: AstronautProvider):
		self.provider = provider

	def get_astronauts(self) -> Sequence[Astronaut]:
		return self.provider.get_astronauts()

	def print_first_ten_youngest_living_astronauts(self, file: Optional[TextIO] = None) -> None:
		print_first_ten_youngest_living_astronauts(self.get_astronauts(), file=file)

	def get_sum_of_number_of_flights_for_american_astronauts(self) -> int:
		return sum_of_flights_for_american_astronauts(self.get_astronauts())

	def get_shortest_nasa_bio_containing_colonel(self) -> Optional[str]:
		return shortest_nasa_bio_containing_colonel(self.get_astronauts())

	def get_number_of_astronauts_by_month_of_date_of_death(self) -> Dict[Month, int]:
		return number_of_astronauts_by_month_of_death(self.get_astronauts())

	def get_name_with_the_most_number_of_words(self) -> Optional[str]:
		return name_with_the_most_words(self.get_astronauts())
