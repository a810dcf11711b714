"""
Normalizer — raw content into sentences and tokens.

Truncation is by length only: the first ENGINE["max_chars"] characters
of the trimmed content, whatever they contain. That bounds the cost of
every later stage regardless of input size.

Tokens are lowercase, Unicode-aware alphanumeric runs ("cinética" is
one token). Sentences keep their original case for the thesis excerpt.
"""

import hashlib
import re
from dataclasses import dataclass

from theory_synth.config import ENGINE
from theory_synth.records import InvalidInputError

_WHITESPACE_RE = re.compile(r'\s+')
_SENTENCE_SPLIT_RE = re.compile(r'(?<=[.!?…;])\s+')
_TOKEN_RE = re.compile(r'[^\W_]+')


@dataclass(frozen=True)
class NormalizedText:
    text: str
    sentences: tuple
    tokens: tuple
    truncated: bool = False
    seed: int = 0    # Content digest for deterministic template rotation


def content_seed(text: str) -> int:
    """Stable digest of the text. Python's hash() is salted per process."""
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return int(digest[:8], 16)


def split_sentences(text: str) -> list[str]:
    """Split on terminal punctuation followed by whitespace."""
    sentences = [s.strip() for s in _SENTENCE_SPLIT_RE.split(text)]
    sentences = [s for s in sentences if s]
    return sentences or [text]


def tokenize(text: str) -> list[str]:
    return _TOKEN_RE.findall(text.lower())


def normalize(content: str, max_chars: int = ENGINE["max_chars"]) -> NormalizedText:
    """Clean, truncate and segment content.

    Raises InvalidInputError if content is empty after trimming.
    """
    if content is None or not content.strip():
        raise InvalidInputError("content is empty or whitespace-only")

    trimmed = content.strip()
    truncated = len(trimmed) > max_chars
    text = _WHITESPACE_RE.sub(" ", trimmed[:max_chars]).strip()

    return NormalizedText(
        text=text,
        sentences=tuple(split_sentences(text)),
        tokens=tuple(tokenize(text)),
        truncated=truncated,
        seed=content_seed(text),
    )
