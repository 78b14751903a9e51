"""Syntax highlighting of C array source, one line (block) at a time."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum


class TokenKind(Enum):
    """Kinds of highlighted text, each with a colour and weight."""

    KEYWORD = ((61, 87, 240), True)
    TYPE = ((0, 139, 139), True)
    SYMBOL = ((55, 140, 200), False)
    NUMBER = ((186, 42, 185), False)
    COMMENT = ((160, 160, 164), False)
    ARRAY_NAME = ((110, 105, 15), False)
    STRING = ((125, 95, 9), False)
    RAW_DELIMITER = ((14, 96, 110), False)

    @property
    def color(self) -> tuple[int, int, int]:
        return self.value[0]

    @property
    def bold(self) -> bool:
        return self.value[1]


class BlockState(IntEnum):
    """State carried from one line to the next."""

    NORMAL = -1
    IN_COMMENT = 1
    IN_RAW_STRING = 2


@dataclass(frozen=True)
class Span:
    """A run of characters given one kind."""

    start: int
    length: int
    kind: TokenKind


@dataclass
class BlockResult:
    """Spans for one line, in application order, and the state it ends in."""

    length: int
    spans: list[Span] = field(default_factory=list)
    state: BlockState = BlockState.NORMAL
    delimiter: str = ""

    def add(self, start: int, length: int, kind: TokenKind) -> None:
        if length > 0 and start < self.length:
            self.spans.append(Span(max(start, 0), length, kind))

    def kinds(self) -> list[TokenKind | None]:
        """Kind of each character; later spans override earlier ones."""
        result: list[TokenKind | None] = [None] * self.length
        for span in self.spans:
            end = min(span.start + span.length, self.length)
            result[span.start:end] = [span.kind] * (end - span.start)
        return result


_KEYWORDS = ("const", "static", "volatile", "thread_local", "constexpr")
_TYPES = (
    "unsigned", "int", "char", "void", "size_t",
    "int32_t", "uint32_t", "int16_t", "uint16_t", "int8_t", "uint8_t",
)


def _rx(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.ASCII)


def _raw_end(delimiter: str) -> re.Pattern[str]:
    return _rx(r"\)" + re.escape(delimiter) + '"')


class CodeHighlighter:
    """Assigns token kinds to lines of C source, tracking comments and raw strings."""

    def __init__(self) -> None:
        rules: list[tuple[re.Pattern[str], TokenKind]] = []
        rules += [(_rx(rf"\b{word}\b"), TokenKind.KEYWORD) for word in _KEYWORDS]
        rules += [(_rx(rf"\b{word}\b"), TokenKind.TYPE) for word in _TYPES]
        # Symbols go before numbers so the dot in a float stays a number.
        rules.append((_rx(r"""[{}\[\],."'=();<>*]+"""), TokenKind.SYMBOL))
        rules.append(
            (_rx(r"\b(?:0x[0-9a-fA-F]+|(?:\d+\.\d+f?)|\d+l?)\b"), TokenKind.NUMBER)
        )
        rules.append((_rx(r"//[^\n]*"), TokenKind.COMMENT))
        rules.append((_rx(r"\b([A-Za-z_]\w*)\s*(?=\[\])"), TokenKind.ARRAY_NAME))
        rules.append((_rx(r'".*?"'), TokenKind.STRING))
        self.rules = rules

        self._comment_start = _rx(r"/\*")
        self._comment_end = _rx(r"\*/")
        self._raw_start = _rx(r'R"([^ ()\\\r\n]*)\(')

    def highlight_block(
        self,
        text: str,
        previous_state: BlockState = BlockState.NORMAL,
        delimiter: str = "",
    ) -> BlockResult:
        """Highlight one line given the state and raw delimiter of the line before."""
        result = BlockResult(len(text))
        if previous_state is BlockState.IN_COMMENT or self._comment_start.search(text):
            self._comments(text, previous_state, result)
            return result

        self._raw_strings(text, previous_state, delimiter, result)
        if (
            previous_state is not BlockState.IN_RAW_STRING
            and result.state is not BlockState.IN_RAW_STRING
        ):
            self._basic_rules(text, result)
        return result

    def highlight(self, text: str) -> list[BlockResult]:
        """Highlight every line of text, carrying state from line to line."""
        results = []
        state, delimiter = BlockState.NORMAL, ""
        for line in text.split("\n"):
            block = self.highlight_block(line, state, delimiter)
            state, delimiter = block.state, block.delimiter
            results.append(block)
        return results

    def _basic_rules(self, text: str, result: BlockResult) -> None:
        for pattern, kind in self.rules:
            for match in pattern.finditer(text):
                result.add(match.start(), match.end() - match.start(), kind)

    def _raw_strings(
        self,
        text: str,
        previous_state: BlockState,
        delimiter: str,
        result: BlockResult,
    ) -> None:
        if previous_state is BlockState.IN_RAW_STRING and delimiter:
            end = _raw_end(delimiter).search(text)
            if end is not None:
                result.add(0, end.start(), TokenKind.STRING)
                result.add(end.start(), end.end() - end.start(), TokenKind.RAW_DELIMITER)
                result.state = BlockState.NORMAL
            else:
                result.add(0, len(text), TokenKind.STRING)
                result.state = BlockState.IN_RAW_STRING
                result.delimiter = delimiter
            return

        start = self._raw_start.search(text)
        while start is not None:
            begin = start.start()
            delimiter = start.group(1)
            end = _raw_end(delimiter).search(text, start.end())

            prefix_length = len(delimiter) + 3
            content_start = begin + prefix_length
            content_end = end.start() if end is not None else len(text)
            result.add(begin, prefix_length, TokenKind.RAW_DELIMITER)
            result.add(content_start, content_end - content_start, TokenKind.STRING)

            if end is None:
                result.state = BlockState.IN_RAW_STRING
                result.delimiter = delimiter
                break
            suffix_length = len(delimiter) + 2
            result.add(end.start(), suffix_length, TokenKind.RAW_DELIMITER)
            result.state = BlockState.NORMAL
            start = self._raw_start.search(text, end.start() + suffix_length)

    def _comments(
        self, text: str, previous_state: BlockState, result: BlockResult
    ) -> None:
        if previous_state is BlockState.IN_COMMENT:
            start = 0
        else:
            found = self._comment_start.search(text)
            if found is None:
                result.state = BlockState.NORMAL
                return
            start = found.start()

        end = self._comment_end.search(text, start)
        if end is None:
            result.state = BlockState.IN_COMMENT
            length = len(text) - start
        else:
            result.state = BlockState.NORMAL
            length = end.end() - start
        result.add(start, length, TokenKind.COMMENT)