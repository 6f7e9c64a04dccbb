"""Structured logging setup shared by the CLI and the loaders."""

from __future__ import annotations
import logging
import sys
from typing import Optional

import structlog
from structlog.types import Processor


def setup_logging(level: str = "INFO", fmt: str = "console") -> structlog.stdlib.BoundLogger:
	shared_processors: list[Processor] = [
		structlog.contextvars.merge_contextvars,
		structlog.stdlib.add_logger_name,
		structlog.stdlib.add_log_level,
		structlog.stdlib.PositionalArgumentsFormatter(),
		structlog.processors.TimeStamper(fmt="iso"),
		structlog.processors.StackInfoRenderer(),
		structlog.processors.UnicodeDecoder(),
	]

	if fmt == "json":
		renderer: Processor = structlog.processors.JSONRenderer()
	else:
		renderer = structlog.dev.ConsoleRenderer(colors=False)

	structlog.configure(
		processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
		logger_factory=structlog.stdlib.LoggerFactory(),
		cache_logger_on_first_use=True,
	)

	formatter = structlog.stdlib.ProcessorFormatter(
		foreign_pre_chain=shared_processors,
		processors=[
			structlog.stdlib.ProcessorFormatter.remove_processors_meta,
			renderer,
		],
	)

	# stdout carries report lines, so logs go to stderr
	handler = logging.StreamHandler(sys.stderr)
	handler.setFormatter(formatter)

	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.addHandler(handler)
	root_logger.setLevel(level.upper())

	logging.getLogger("matplotlib").setLevel(logging.WARNING)
	logging.getLogger("PIL").setLevel(logging.WARNING)

	return structlog.get_logger()


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
	# initial values keep the proxy lazy until setup_logging has run
	if name:
		return structlog.get_logger(component=name)
	return structlog.get_logger()
