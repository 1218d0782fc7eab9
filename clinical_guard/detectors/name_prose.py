from __future__ import annotations
import re
from .base import BaseDetector, is_name_like
from ..models import IdentifierReason
from ..wordlists import NON_NAME_WORDS, REPORTING_VERBS

_CHUNK_RE = re.compile(r"[^.!?\n]+")
_TOKEN_RE = re.compile(r"\S+")


def _looks_like_name(word: str) -> bool:
    return is_name_like(word) and word not in NON_NAME_WORDS


class NameInProseDetector(BaseDetector):
    """Names opening a sentence as the subject of a reporting verb.

    "Anna uppger smärta", "Karl Berg denies fever". Only the first one or
    two tokens of each sentence-like chunk are considered.
    """

    reason = IdentifierReason.NAME_IN_PROSE

    def detect(self, text: str) -> str | None:
        for chunk in _CHUNK_RE.finditer(text):
            tokens: list[tuple[int, str]] = []
            for tok in _TOKEN_RE.finditer(chunk.group(0)):
                tokens.append((chunk.start() + tok.start(), tok.group(0).rstrip(",")))
                if len(tokens) == 3:
                    break

            if len(tokens) < 2 or not _looks_like_name(tokens[0][1]):
                continue

            start = tokens[0][0]
            if tokens[1][1] in REPORTING_VERBS:
                return text[start : start + len(tokens[0][1])]

            if (
                len(tokens) == 3
                and _looks_like_name(tokens[1][1])
                and tokens[2][1] in REPORTING_VERBS
            ):
                return text[start : tokens[1][0] + len(tokens[1][1])]

        return None
