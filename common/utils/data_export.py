"""
Generic text export utilities for measurement data.
"""

import datetime
import time
from pathlib import Path
from typing import Any, Iterable, Optional, Union
from abc import ABC, abstractmethod


class DataExportError(Exception):
    """Exception raised for data export errors."""
    pass


class DataExporter(ABC):
    """
    Abstract base class for exporters that render a data source to text.

    Subclasses implement render(); save() handles the file system side.
    """

    @abstractmethod
    def render(self, source: Any) -> str:
        """Render the data source to export text."""
        pass

    def save(self, source: Any, file_path: Union[str, Path]) -> Path:
        """
        Render the source and write it to a file.

        The source is rendered before the file is opened, so a render
        error never leaves a partial file behind.

        Args:
            source: Data source passed to render()
            file_path: Destination path (parent directories are created)

        Returns:
            Path: The written file

        Raises:
            DataExportError: If the file cannot be written
        """
        text = self.render(source)
        try:
            path = self.ensure_directory(file_path)
            with open(path, mode='w', newline='', encoding='utf-8') as file:
                file.write(text)
        except OSError as e:
            raise DataExportError(f"Failed to write {file_path}: {e}") from e
        return path

    @staticmethod
    def generate_timestamp() -> str:
        """Generate an epoch-millisecond timestamp string for filenames."""
        return str(int(time.time() * 1000))

    @staticmethod
    def ensure_directory(file_path: Union[str, Path]) -> Path:
        """Ensure the directory for a file path exists."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path


def format_fixed(value: float, precision: int = 6) -> str:
    """Format a number with a fixed count of decimals."""
    return f"{float(value):.{precision}f}"


def format_iso_timestamp(timestamp: datetime.datetime) -> str:
    """
    Format a timestamp as ISO-8601 UTC with milliseconds and a 'Z' suffix.

    Naive timestamps are taken to be UTC already.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return timestamp.isoformat(timespec='milliseconds') + "Z"


def join_quoted(values: Iterable[float], delimiter: str = ";",
                precision: int = 6, quote: Optional[str] = '"') -> str:
    """Join numbers into one field, each fixed-formatted, wrapped in quotes."""
    joined = delimiter.join(format_fixed(v, precision) for v in values)
    if quote:
        return f"{quote}{joined}{quote}"
    return joined
