# Path: order_config/exceptions.py
"""
Load Errors for order_config

Only construction-time structural problems are errors. Lookup misses
and unparseable values are ordinary outcomes handled by the resolver
and the typed accessors.
"""

from typing import Optional


class LoadError(Exception):
    """
    A table source could not be read or parsed into a consistent table.

    Attributes:
        source: Where the table came from (file path or '<memory>')
    """

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class MalformedRowError(LoadError):
    """
    A row's field count differs from the header's.

    Attributes:
        line_number: 1-based line number of the offending row
        expected: Number of header columns
        actual: Number of fields found in the row
    """

    def __init__(
        self,
        line_number: int,
        expected: int,
        actual: int,
        source: Optional[str] = None
    ):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"line {line_number} has {actual} fields, header has {expected}",
            source=source,
        )


__all__ = ['LoadError', 'MalformedRowError']
