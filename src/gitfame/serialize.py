"""Rendering of ranked contributor statistics."""

import csv
import io
import json
import logging
from typing import Any, Dict, List, Sequence, TextIO

from .config import OUTPUT_FORMATS
from .models import ContributorStatistics

logger = logging.getLogger(__name__)

HEADER = ("Name", "Lines", "Commits", "Files")


def _row(stats: ContributorStatistics) -> List[str]:
    return [stats.name, str(stats.lines), str(stats.commits), str(stats.files)]


class StatisticsSerializer:
    """Writes statistics in one of the supported output formats."""

    def __init__(self, output_format: str = "tabular"):
        """Initialize with the output format identifier."""
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"unsupported format: {output_format}")
        self.output_format = output_format

    def write(self, statistics: Sequence[ContributorStatistics], stream: TextIO) -> None:
        """Write ``statistics`` to ``stream`` in ranked order."""
        logger.debug(
            "Serializing statistics",
            extra={"format": self.output_format, "contributors": len(statistics)},
        )
        writers = {
            "tabular": self._write_tabular,
            "csv": self._write_csv,
            "json": self._write_json,
            "json-lines": self._write_json_lines,
        }
        writers[self.output_format](statistics, stream)

    def render(self, statistics: Sequence[ContributorStatistics]) -> str:
        """Return the serialized output as a string."""
        buffer = io.StringIO()
        self.write(statistics, buffer)
        return buffer.getvalue()

    def _write_tabular(self, statistics: Sequence[ContributorStatistics], stream: TextIO) -> None:
        """Align columns with one space of padding; the last column is not padded."""
        rows = [list(HEADER)] + [_row(stats) for stats in statistics]
        widths = [max(len(row[i]) for row in rows) + 1 for i in range(len(HEADER) - 1)]
        for row in rows:
            cells = [cell.ljust(width) for cell, width in zip(row, widths)]
            cells.append(row[-1])
            stream.write("".join(cells) + "\n")

    def _write_csv(self, statistics: Sequence[ContributorStatistics], stream: TextIO) -> None:
        writer = csv.writer(stream, lineterminator="\n")
        writer.writerow(HEADER)
        for stats in statistics:
            writer.writerow(_row(stats))

    def _write_json(self, statistics: Sequence[ContributorStatistics], stream: TextIO) -> None:
        stream.write(self.to_json_string([stats.to_dict() for stats in statistics]) + "\n")

    def _write_json_lines(self, statistics: Sequence[ContributorStatistics], stream: TextIO) -> None:
        for stats in statistics:
            stream.write(self.to_json_string(stats.to_dict()) + "\n")

    @staticmethod
    def to_json_string(data: Any) -> str:
        """Compact JSON with keys in insertion order."""
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))

    def create_success_envelope(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create success envelope around payload."""
        logger.debug("Creating success envelope")
        return {"ok": True, "data": payload}
