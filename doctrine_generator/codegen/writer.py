"""
Append-only line writer with an indentation stack.
"""

from typing import List, Optional

from ..constants import OutputFormat


class CodeWriter:
    """
    Accumulates lines of generated code.

    ``indent()`` pushes one indentation level and ``outdent()`` pops it; every
    non-empty line is prefixed with the current levels. Empty lines stay
    empty so generated files carry no trailing whitespace on blank lines.
    """

    def __init__(self, indent_string: Optional[str] = None):
        self.indent_string = OutputFormat.DEFAULT_INDENT if indent_string is None else indent_string
        self._lines: List[str] = []
        self._indentations: List[str] = []

    def indent(self) -> None:
        self._indentations.append(self.indent_string)

    def outdent(self) -> None:
        if self._indentations:
            self._indentations.pop()

    def write_line(self, line: Optional[str] = None) -> None:
        if line:
            self._lines.append("".join(self._indentations) + line)
        else:
            self._lines.append("")

    def get_data(self) -> str:
        return "\n".join(self._lines)
