import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional
from .config import load_app_config
from .logging import setup_logging, get_logger
from .records.loaders import DatasetLoadError, SnapshotProvider
from .queries.manager import AstronautManager
from .report.outputs import collect_results, write_outputs, plot_run


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="astronaut-reports", description="Reports over the astronaut snapshot")
	parser.add_argument("--config", type=str, default=None, help="YAML config file")
	parser.add_argument("--dataset", type=str, default=None, help="Snapshot JSON, overrides the config")
	sub = parser.add_subparsers(dest="cmd", required=True)

	sub.add_parser("youngest", help="Print the ten youngest living astronauts")
	sub.add_parser("summary", help="Print every query result as JSON")

	p_report = sub.add_parser("report", help="Write query results to a directory")
	p_report.add_argument("--out", required=True, type=str)

	p_plot = sub.add_parser("plot", help="Plot a prior report")
	p_plot.add_argument("--run", required=True, type=str)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	cfg = load_app_config(args.config)
	setup_logging(cfg.log_level, cfg.log_format)
	log = get_logger("cli")

	if args.cmd == "plot":
		plot_run(Path(args.run))
		return 0

	dataset = args.dataset if args.dataset is not None else cfg.dataset
	manager = AstronautManager(SnapshotProvider(dataset))
	try:
		astronauts = manager.get_astronauts()
	except DatasetLoadError as exc:
		log.error("dataset_unavailable", error=str(exc))
		return 1

	if args.cmd == "youngest":
		manager.print_first_ten_youngest_living_astronauts()
	elif args.cmd == "summary":
		print(json.dumps(collect_results(astronauts), indent=2))
	elif args.cmd == "report":
		results = collect_results(astronauts)
		write_outputs(results, Path(args.out))
		log.info("report_written", out=args.out)
		print(json.dumps(results["summary"], indent=2))
	return 0

if __name__ == "__main__":
	sys.exit(main())
