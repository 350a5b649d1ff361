import logging
import re
from typing import Iterable, Iterator

from vme_decoder.exception import WordParseError
from vme_decoder.model.word_layout import WORD_MASK

logger = logging.getLogger("WordReader")

_HEX_PATTERN = re.compile(r"0[xX]([0-9a-fA-F]+)")
_OCT_PATTERN = re.compile(r"0([0-7]+)")
_DEC_PATTERN = re.compile(r"0|[1-9][0-9]*")


def parse_word(token: str) -> int:
    """
    Parse one token into an unsigned 32-bit word.

    Accepted forms:
        - hexadecimal with 0x / 0X prefix   e.g. 0x40010c07
        - octal with a leading zero         e.g. 017
        - decimal                           e.g. 1073810439

    Raises:
        WordParseError: token has none of these forms or exceeds 32 bits.
    """
    text = token.strip()

    if match := _HEX_PATTERN.fullmatch(text):
        value = int(match.group(1), 16)
    elif match := _OCT_PATTERN.fullmatch(text):
        value = int(match.group(1), 8)
    elif _DEC_PATTERN.fullmatch(text):
        value = int(text, 10)
    else:
        raise WordParseError(f"Not a data word: {token!r}", token=token)

    if value > WORD_MASK:
        raise WordParseError(f"Data word out of 32-bit range: {token!r}", token=token)

    return value


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Split lines into whitespace-separated tokens."""
    for line in lines:
        yield from line.split()


class WordReader:
    """
    Reads data words from a text source.

    Reading stops at the first unparseable token, the same way it stops at
    end of input. Words read before that token are still yielded.
    """

    def __init__(self) -> None:
        self.words_read = 0
        self.stopped_at: str | None = None

    def read(self, lines: Iterable[str]) -> Iterator[int]:
        for token in iter_tokens(lines):
            try:
                word = parse_word(token)
            except WordParseError as e:
                self.stopped_at = e.token
                logger.warning(f"[READER] Stopped reading after {self.words_read} word(s): {e}")
                return
            self.words_read += 1
            yield word
