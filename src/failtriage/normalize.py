"""Failure text normalizer that removes noise before similarity checks.

Two failures that differ only in timestamps, pointer values, addresses or
request IDs should compare as near-identical.  ``normalize`` deletes dates
and renames noisy identifiers to ``UNIQ<k>`` labels in order of first
appearance, then bounds the size of very long outputs.

Substitution order matters: dates are removed before alpha-conversion so
the digits inside timestamps are never renamed.
"""

from __future__ import annotations

import logging
import re
from typing import Dict

logger = logging.getLogger(__name__)

# --- Dates and timestamps (deleted outright) ---------------------------------
_DATE_RE = re.compile(
    r"[A-Z][a-z]{2} [A-Z][a-z]{2} +\d{1,2} \d\d:\d\d:\d\d(?:\.\d+)? \d{4}"  # ctime
    r"|[A-Z][a-z]{2}, \d+ \w+ 2\d{3} [\d.-: ]*(?:[-+]\d+)?"  # RFC 1123
    r"|\w{3} \d{1,2} \d+:\d+:\d+(?:\.\d+)?"  # syslog
    r"|(?:\d{4}-\d\d-\d\d.|.\d{4} )\d\d:\d\d:\d\d(?:.\d+)?",  # ISO 8601-ish
    re.ASCII,
)

# --- Noisy identifiers (renamed to UNIQ<k>), tried in this order -------------
_ORDINAL_RE = re.compile(
    r"0x[0-9a-fA-F]+"
    r"|\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}"
    r"|[0-9a-fA-F]{8}-\S{4}-\S{4}-\S{4}-\S{12}(?:-\d+)?"
    r"|[0-9a-f]{14,32}",
    re.ASCII,
)

# Test-name tags such as [sig-network] or {Slow}. Must stay in sync with
# the other tools that classify test names.
_NAME_TAG_RE = re.compile(r"\[.*?\]|\{.*?\}")
# Unicode White_Space: ASCII whitespace, NEL, NBSP and the space separators.
_NAME_SPACE_RE = re.compile(r"[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+")

MAX_LENGTH = 10000
KEEP_LENGTH = 5000
TRUNCATION_MARKER = "\n...[truncated]...\n"


def _alpha_convert(text: str) -> str:
    labels: Dict[str, str] = {}

    def repl(m: re.Match) -> str:
        literal = m.group(0)
        if literal not in labels:
            labels[literal] = f"UNIQ{len(labels)}"
        return labels[literal]

    return _ORDINAL_RE.sub(repl, text)


def _collapse_repeated_lines(text: str) -> str:
    kept = []
    last = None
    for line in text.split("\n"):
        if line != last:
            kept.append(line)
        last = line
    return "\n".join(kept)


def normalize(text: str) -> str:
    """Reduce the entropy of a failure message so similar ones cluster.

    Steps, in order:
      1. Delete dates and timestamps.
      2. Rename hex constants, IPs, UUIDs and hex garbage to ``UNIQ<k>``.
      3. For texts over 10,000 characters, drop lines equal to the line
         immediately before them.
      4. If still over 10,000 characters, keep the first and last 5,000
         characters around a ``...[truncated]...`` marker.

    Idempotent for ordinary failure text, but not when a label is glued
    to leftover hex or dotted digits: a 45-character hex run becomes
    ``UNIQ0`` plus 13 hex characters, and ``0x1.2.3.4`` becomes
    ``UNIQ0.2.3.4``, both of which match again on a second pass.
    """
    text = _DATE_RE.sub("", text)
    text = _alpha_convert(text)

    if len(text) > MAX_LENGTH:
        before = len(text)
        text = _collapse_repeated_lines(text)
        logger.debug("collapsed repeated lines: %d -> %d chars", before, len(text))

    if len(text) > MAX_LENGTH:
        logger.debug("truncating %d chars of failure text", len(text))
        text = text[:KEEP_LENGTH] + TRUNCATION_MARKER + text[-KEEP_LENGTH:]

    return text


def normalize_name(name: str) -> str:
    """Strip ``[...]`` and ``{...}`` tags from a test name and tidy spacing.

    Words are split on Unicode White_Space only, so the ASCII separator
    controls ``\\x1c``-``\\x1f`` stay part of a word as they do in the other
    test-name classifiers.

    >>> normalize_name("TestFoo[sig-network] {Slow}  runs ok")
    'TestFoo runs ok'
    """
    name = _NAME_TAG_RE.sub("", name)
    return " ".join(w for w in _NAME_SPACE_RE.split(name) if w)
