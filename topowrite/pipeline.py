"""Pipeline orchestration: load, build, sort and emit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .builder import build_items
from .config import load_config
from .emitter import DocumentEmitter
from .logging import get_logger
from .sorter import sort_items


@dataclass
class PipelineOutcome:
    """Result of a successful pipeline run."""

    path: Path
    order: List[str] = field(default_factory=list)


class Pipeline:
    """Runs a project file through the builder, sorter and emitter."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        emitter: DocumentEmitter | None = None,
    ) -> None:
        self.logger = logger or get_logger("pipeline")
        self.emitter = emitter or DocumentEmitter()

    def run(self, input_path: Path, output_path: Path) -> PipelineOutcome:
        """Write the document described by ``input_path`` to ``output_path``.

        Raises ``FileNotFoundError`` / ``ConfigError`` for unreadable input,
        ``SchemaError`` for malformed items and ``OrderingError`` when the
        items cannot be sorted. Nothing is written on failure.
        """
        input_path = Path(input_path)
        self.logger.info("Reading %s", input_path)
        data = load_config(input_path)

        result = build_items(data)
        self.logger.debug("Built %d items", len(result.items))

        outcome = sort_items(result.items)
        if not outcome.ok:
            self.logger.error("%s", outcome.issue.describe())
        ordered = outcome.unwrap()
        self.logger.debug("%s", outcome.names)
        self.logger.debug("%s", result.metadata.header)

        written = self.emitter.emit(result.metadata, ordered, Path(output_path))
        self.logger.info("Wrote %d inputs to %s", len(ordered), written)
        return PipelineOutcome(path=written, order=outcome.names)


__all__ = ["Pipeline", "PipelineOutcome"]
