from __future__ import annotations
from datetime import date, timedelta
from enum import IntEnum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Month(IntEnum):
	JANUARY = 1
	FEBRUARY = 2
	MARCH = 3
	APRIL = 4
	MAY = 5
	JUNE = 6
	JULY = 7
	AUGUST = 8
	SEPTEMBER = 9
	OCTOBER = 10
	NOVEMBER = 11
	DECEMBER = 12

	@classmethod
	def of(cls, d: date) -> "Month":
		return cls(d.month)


class Astronaut(BaseModel):
	# Snapshot keys are camelCase (dateOfBirth, numberOfFlights, ...)
	model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

	name: str = Field(min_length=1)
	date_of_birth: date
	date_of_death: Optional[date] = None
	nationality: str
	bio: str
	agency: str
	time_in_space: timedelta
	number_of_spacewalks: int = Field(ge=0)
	number_of_flights: int = Field(ge=0)
	in_space: bool

	@property
	def is_living(self) -> bool:
		return self.date_of_death is None


class AstronautsFile(BaseModel):
	astronauts: List[Astronaut]
