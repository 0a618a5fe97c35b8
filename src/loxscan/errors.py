"""Error type with formatted source context."""

from __future__ import annotations


class ScanError(Exception):
    """Raised on the first scanning error, with line, offset and source context."""

    def __init__(self, message: str, line: int, offset: int, source: str) -> None:
        self.message = message
        self.line = line
        self.offset = offset
        self.source = source
        super().__init__(self.format())

    def _line_bounds(self) -> tuple[int, int]:
        # Lines end at "\n" only, matching the scanner's line counter
        start = self.source.rfind("\n", 0, self.offset) + 1
        end = self.source.find("\n", self.offset)
        if end == -1:
            end = len(self.source)
        return start, end

    @property
    def column(self) -> int:
        """1-based column of the error offset within its line."""
        return self.offset - self._line_bounds()[0] + 1

    @property
    def source_line(self) -> str:
        """Text of the line holding the error offset, without its line ending."""
        start, end = self._line_bounds()
        return self.source[start:end].removesuffix("\r")

    def format(self, filename: str = "<input>") -> str:
        number = str(self.line)
        margin = " " * len(number)
        snippet = [
            f"error: {self.message}",
            f"{margin} --> {filename}:{self.line}:{self.column}",
            f"{margin} |",
            f"{number} | {self.source_line}",
            f"{margin} | {' ' * (self.column - 1)}^",
        ]
        return "\n".join(snippet)
