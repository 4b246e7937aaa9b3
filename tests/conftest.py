"""Shared pytest fixtures for the failure-triage test suite.

Provides a fresh histogram cache per test, realistic failure messages
that differ only in noise, and a helper for writing failure text files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from failtriage.ngram import HistogramCache


@pytest.fixture
def cache() -> HistogramCache:
    """Return an empty, test-local histogram cache.

    Tests pass it explicitly so they never depend on (or pollute) the
    process-wide default cache.
    """
    return HistogramCache()


@pytest.fixture
def noisy_pair() -> tuple[str, str]:
    """Two failure messages for the same logical failure.

    They differ in the timestamp, the pointer values, the node IP and the
    pod UUID, all of which normalization removes or renames.
    """
    first = (
        "Mon Jan 2 15:04:05 2023 test failed\n"
        "panic: nil pointer dereference at 0xc000123abc (previous 0xc000123abc)\n"
        "node 10.0.3.17 pod 123e4567-e89b-12d3-a456-426614174000 not ready"
    )
    second = (
        "Tue Feb 14 09:12:44 2023 test failed\n"
        "panic: nil pointer dereference at 0xc0009f8e10 (previous 0xc0009f8e10)\n"
        "node 10.0.9.201 pod 9b2f1c3e-0d4a-4e8f-b6a1-2c3d4e5f6a7b not ready"
    )
    return first, second


@pytest.fixture
def write_failure(tmp_path: Path):
    """Factory fixture that writes *text* to a file and returns its path.

    Example::

        path = write_failure("a.txt", "panic: boom")
    """

    def _write(name: str, text: str) -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write
