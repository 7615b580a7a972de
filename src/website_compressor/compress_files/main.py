"""Core logic for compressing files in place: directory walk and per-type dispatch."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from website_compressor.compressors.base import Compressor, ConsoleReporter, DiagnosticReporter
from website_compressor.compressors.registry import ContentType, content_type_for, create_compressor
from website_compressor.models.config import Configuration
from website_compressor.utils.textio import read_text, write_text

logger = logging.getLogger(__name__)


@dataclass
class RunStats:
    """Counters for one run."""
    compressed: int = 0
    skipped: int = 0
    chars_in: int = 0
    chars_out: int = 0


class FileWalker:
    """Walk targets depth-first and rewrite every recognized file in place.

    One compressor per content type is created on first use and reused for
    the rest of the run. Any failure propagates and ends the run.
    """

    def __init__(self, config: Configuration, reporter: Optional[DiagnosticReporter] = None):
        self.config = config
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.compressors: Dict[ContentType, Compressor] = {}
        self.stats = RunStats()

    def compressor_for(self, content_type: ContentType) -> Compressor:
        compressor = self.compressors.get(content_type)
        if compressor is None:
            compressor = create_compressor(content_type, self.config, self.reporter)
            self.compressors[content_type] = compressor
        return compressor

    def process(self, path: str | Path) -> None:
        path = Path(path)
        if path.is_dir():
            try:
                entries = os.listdir(path)
            except OSError as e:
                logger.debug(f"Cannot list {path}: {e}")
                entries = []
            for entry in entries:
                self.process(path / entry)
            return

        content_type = content_type_for(path.name) if path.is_file() else None
        if content_type is None:
            logger.debug(f"Skipping {path}")
            self.stats.skipped += 1
            return

        self.compress_file(path, content_type)

    def compress_file(self, path: Path, content_type: ContentType) -> None:
        compressor = self.compressor_for(content_type)
        text = read_text(path, self.config.charset)
        result = compressor.compress(text)
        write_text(path, result, self.config.charset)

        self.stats.compressed += 1
        self.stats.chars_in += len(text)
        self.stats.chars_out += len(result)
        logger.debug(f"Compressed {path}: {len(text):,} → {len(result):,} characters")


def compress_files(
    targets: List[str],
    config: Configuration,
    reporter: Optional[DiagnosticReporter] = None,
) -> RunStats:
    """Compress every recognized file under `targets`, in order.

    Args:
        targets: Files or directories given on the command line.
        config: Options shared by all compressors.
        reporter: Sink for JavaScript diagnostics, stderr by default.
    """
    walker = FileWalker(config, reporter)
    for target in targets:
        walker.process(target)

    stats = walker.stats
    ratio = (1 - stats.chars_out / stats.chars_in) * 100 if stats.chars_in > 0 else 0
    logger.debug(
        f"Compressed {stats.compressed} files, skipped {stats.skipped}: "
        f"{stats.chars_in:,} → {stats.chars_out:,} characters ({ratio:.1f}% reduction)"
    )
    return stats


def main(targets: List[str], config: Configuration) -> RunStats:
    """Entry point called from cli.py."""
    return compress_files(targets, config)
