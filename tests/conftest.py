import logging
from datetime import date, timedelta
import pytest
from astronauts.records.astronaut_schema import Astronaut


@pytest.fixture(autouse=True)
def _detach_log_handlers():
	# the CLI binds a handler to the captured stderr of the running test
	yield
	logging.getLogger().handlers.clear()


@pytest.fixture
def make_astronaut():
	def _make(name="Test Astronaut", born=date(1970, 1, 1), died=None, nationality="American", bio="", agency="NASA", flights=1, **kw):
		return Astronaut(
			name=name,
			date_of_birth=born,
			date_of_death=died,
			nationality=nationality,
			bio=bio,
			agency=agency,
			time_in_space=kw.pop("time_in_space", timedelta(days=10)),
			number_of_spacewalks=kw.pop("number_of_spacewalks", 0),
			number_of_flights=flights,
			in_space=kw.pop("in_space", False),
			**kw,
		)
	return _make
