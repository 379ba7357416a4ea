# Path: order_config/loaders/table_source.py
"""
Table Source for order_config

BLIND reader for the manifest and values files.
Returns raw lines only. Splitting, normalization and validation
belong to table_loader.py.
"""

from pathlib import Path
from typing import Union

from ..core.logger import get_input_logger
from ..exceptions import LoadError


class TableSource:
    """
    Reads raw table lines from disk.

    Example:
        source = TableSource()
        lines = source.read_lines(Path('input_files/manifest.csv'))
    """

    def __init__(self, encoding: str = 'utf-8-sig'):
        """
        Initialize table source.

        Args:
            encoding: Text encoding of the files (BOM tolerated by default)
        """
        self.encoding = encoding
        self.logger = get_input_logger('table_source')

    def read_lines(self, path: Union[str, Path]) -> list[str]:
        """
        Read every line of a table file.

        Args:
            path: File to read

        Returns:
            Lines without line terminators

        Raises:
            LoadError: If the file is missing or unreadable
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"cannot read table: {e}", source=str(path)) from e

        lines = text.splitlines()
        self.logger.debug(f"Read {len(lines)} lines from {path}")
        return lines


__all__ = ['TableSource']
