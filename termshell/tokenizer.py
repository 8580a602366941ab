"""Shell-like tokenizer for splitting command lines into argument vectors."""

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Callable, Optional

from .exceptions import (
    HangingEscape,
    IllegalEscape,
    MissingWhitespaceAfterQuote,
    PrematureQuote,
    UnterminatedQuote,
)

BACKSLASH = "\\"
QUOTES = ('"', "'")


class QuoteMode(enum.Enum):
    """Quote state of the scanner."""

    NONE = ""
    IN_DOUBLE = '"'
    IN_SINGLE = "'"
    # A quote block closed on the previous character, so whitespace must follow
    JUST_CLOSED = "."


@dataclass
class ScanState:
    """Transient state for a single tokenize call."""

    tokens: list[str] = field(default_factory=list)
    working_index: int = 0
    quote_mode: QuoteMode = QuoteMode.NONE
    escape_pending: bool = False
    last_was_whitespace: bool = True

    def snapshot(self) -> "ScanState":
        """Return a copy that later steps cannot mutate."""
        return dataclasses.replace(self, tokens=list(self.tokens))


TraceCallback = Callable[[Optional[str], ScanState], None]


class _Scanner:
    """Forward-only state machine over the characters of one command line."""

    def __init__(self):
        self.state = ScanState()

    def _in_quote_block(self) -> bool:
        return self.state.quote_mode in (QuoteMode.IN_DOUBLE, QuoteMode.IN_SINGLE)

    def _slot_exists(self) -> bool:
        return self.state.working_index < len(self.state.tokens)

    def _push(self, text: str) -> None:
        """Append text to the working token, creating the slot if absent."""
        state = self.state
        if self._slot_exists():
            state.tokens[state.working_index] += text
        else:
            state.tokens.append(text)

    def _next_token(self) -> None:
        if self._slot_exists():
            self.state.working_index += 1

    def _step_whitespace(self, ch: str) -> bool:
        state = self.state
        if not ch.isspace():
            if state.quote_mode is QuoteMode.JUST_CLOSED:
                raise MissingWhitespaceAfterQuote(
                    "whitespace must immediately follow a closed quote block"
                )
            return False

        # Escaped or quoted whitespace is literal
        if state.escape_pending or self._in_quote_block():
            return False

        if state.quote_mode is QuoteMode.JUST_CLOSED:
            state.quote_mode = QuoteMode.NONE

        self._next_token()
        state.last_was_whitespace = True
        return True

    def _step_escape_start(self, ch: str) -> bool:
        if ch != BACKSLASH or self.state.escape_pending:
            return False

        self.state.escape_pending = True
        return True

    def _step_hanging_escape(self, ch: str) -> bool:
        state = self.state
        if not state.escape_pending:
            return False

        if ch not in QUOTES and ch != BACKSLASH:
            raise IllegalEscape(
                f"only a quote or backslash may be escaped, not {ch!r}"
            )

        self._push(ch)
        state.escape_pending = False
        return True

    def _step_quote(self, ch: str) -> bool:
        state = self.state
        if ch not in QUOTES:
            return False

        mode = QuoteMode(ch)
        if state.quote_mode is QuoteMode.NONE:
            if not state.last_was_whitespace:
                raise PrematureQuote("quote block cannot start mid-word")
            state.quote_mode = mode
            # An empty pair of quotes still produces a token
            self._push("")
        elif state.quote_mode is mode:
            state.quote_mode = QuoteMode.JUST_CLOSED
        elif state.quote_mode is QuoteMode.JUST_CLOSED:
            pass
        else:
            self._push(ch)

        return True

    def _step_ordinary(self, ch: str) -> None:
        self._push(ch)
        self.state.last_was_whitespace = False

    def step(self, ch: str) -> None:
        """Resolve one character with the first rule that claims it."""
        if (
            self._step_whitespace(ch)
            or self._step_escape_start(ch)
            or self._step_hanging_escape(ch)
            or self._step_quote(ch)
        ):
            return
        self._step_ordinary(ch)

    def finish(self) -> list[str]:
        """Check that the scan may legally end here and return the tokens."""
        if self.state.escape_pending:
            raise HangingEscape("command cannot end with a hanging escape")
        if self._in_quote_block():
            raise UnterminatedQuote("command cannot end with an unterminated quote")
        return self.state.tokens


def tokenize(line: str, trace: Optional[TraceCallback] = None) -> list[str]:
    """
    Split a command line into tokens, handling quotes and escapes.

    Rules:
    - Whitespace separates tokens; runs of whitespace never create empty tokens
    - Single quotes (') and double quotes (") group characters into one token
    - A quote block may only open at the start of a word and must be
      followed by whitespace or the end of the line once closed
    - Inside a block, the other kind of quote is an ordinary character
    - Backslash (\\) escapes the next character, which must be a quote or
      a backslash
    - Quotes and escaping backslashes are removed from tokens
    - An empty quote pair produces an empty token

    Args:
        line: The command line to split
        trace: Optional callback receiving each character and a snapshot of
            the scan state after it was processed (None before the first)

    Returns:
        List of parsed tokens

    Raises:
        ShellSyntaxError: If the line is malformed; the subclass names the
            condition
    """
    scanner = _Scanner()

    if trace:
        trace(None, scanner.state.snapshot())

    for ch in line:
        scanner.step(ch)
        if trace:
            trace(ch, scanner.state.snapshot())

    return scanner.finish()
