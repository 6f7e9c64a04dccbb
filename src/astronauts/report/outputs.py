from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Sequence
import json
import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
from ..records.astronaut_schema import Astronaut, Month
from ..queries.manager import (
	first_ten_youngest_living_astronauts,
	name_with_the_most_words,
	number_of_astronauts_by_month_of_death,
	shortest_nasa_bio_containing_colonel,
	sum_of_flights_for_american_astronauts,
)
plt.style.use("seaborn-v0_8-darkgrid")


def collect_results(astronauts: Sequence[Astronaut]) -> Dict[str, Any]:
	youngest = first_ten_youngest_living_astronauts(astronauts)
	deaths = number_of_astronauts_by_month_of_death(astronauts)
	summary = {
		"total_astronauts": len(astronauts),
		"living_astronauts": sum(1 for a in astronauts if a.is_living),
		"sum_of_flights_american": sum_of_flights_for_american_astronauts(astronauts),
		"shortest_nasa_colonel_bio": shortest_nasa_bio_containing_colonel(astronauts),
		"name_with_most_words": name_with_the_most_words(astronauts),
	}
	return {
		"youngest_living": [{"name": a.name, "date_of_birth": a.date_of_birth.isoformat()} for a in youngest],
		"deaths_by_month": {m.name: n for m, n in deaths.items()},
		"summary": summary,
	}


def write_outputs(results: Dict[str, Any], out_dir: Path) -> None:
	out_dir.mkdir(parents=True, exist_ok=True)
	fig_dir = out_dir / "figs"
	fig_dir.mkdir(parents=True, exist_ok=True)
	youngest_df = pd.DataFrame(results["youngest_living"], columns=["name", "date_of_birth"])
	youngest_df.to_csv(out_dir / "youngest_living.csv", index=False)
	# Every month gets a row, missing months count zero
	deaths = results["deaths_by_month"]
	deaths_df = pd.DataFrame({
		"month": [m.name for m in Month],
		"count": [int(deaths.get(m.name, 0)) for m in Month],
	})
	deaths_df.to_csv(out_dir / "deaths_by_month.csv", index=False)
	with (out_dir / "summary.json").open("w", encoding="utf-8") as f:
		json.dump(results["summary"], f, indent=2)
	_plot_deaths_by_month(deaths_df)
	plt.savefig(fig_dir / "deaths_by_month.png", dpi=150)
	plt.close()


def _plot_deaths_by_month(deaths_df: pd.DataFrame) -> None:
	plt.figure(figsize=(9,4.8))
	plt.bar([m[:3].title() for m in deaths_df["month"]], deaths_df["count"])
	ax = plt.gca()
	ax.yaxis.set_major_locator(mticker.MaxNLocator(integer=True))
	plt.xlabel("Month of death")
	plt.ylabel("Astronauts")
	plt.grid(True, axis="y")
	plt.tight_layout()


def plot_run(out_dir: Path) -> None:
	deaths_df = pd.read_csv(out_dir / "deaths_by_month.csv")
	_plot_deaths_by_month(deaths_df)
	plt.show()
