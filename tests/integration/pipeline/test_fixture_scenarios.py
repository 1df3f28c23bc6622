from __future__ import annotations

"""
Fixture-driven scenarios for the report pipeline.

Each directory under tests/fixtures holds an `input` file (one path per
line) and a `want` file with the exact expected report.
"""

from pathlib import Path

import pytest

from pathtree.core.pipeline.engine import run_pipeline
from pathtree.core.pipeline.reader import read_path_file

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"
FIXTURE_CASES = sorted(p for p in FIXTURES_DIR.iterdir() if p.is_dir())


@pytest.mark.parametrize("case", FIXTURE_CASES, ids=lambda p: p.name)
def test_fixture_output(case: Path):
    want = (case / "want").read_text(encoding="utf-8")

    report = run_pipeline(read_path_file(str(case / "input")))

    assert report.text == want


def test_fixtures_present():
    assert {p.name for p in FIXTURE_CASES} >= {"shared_prefix", "single_file", "nested"}
