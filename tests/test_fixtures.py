"""Tests for the sample share files."""

import json

from secretrecon.intake.case import load_case, solve
from secretrecon.intake.fixtures import SAMPLE_CASE, write_fixtures


def test_write_fixtures(tmp_path):
    written = write_fixtures(tmp_path)
    assert {p.relative_to(tmp_path).as_posix() for p in written} == {
        "testcase1.json",
        "testcase2.json",
        "examples/sampleTest.json",
    }
    assert json.loads((tmp_path / "testcase1.json").read_text()) == SAMPLE_CASE
    assert solve(load_case(tmp_path / "examples" / "sampleTest.json")).secret == 3


def test_existing_files_kept(tmp_path):
    (tmp_path / "testcase1.json").write_text("{}")
    written = write_fixtures(tmp_path)
    assert tmp_path / "testcase1.json" not in written
    assert (tmp_path / "testcase1.json").read_text() == "{}"


def test_overwrite(tmp_path):
    (tmp_path / "testcase1.json").write_text("{}")
    write_fixtures(tmp_path, overwrite=True)
    assert json.loads((tmp_path / "testcase1.json").read_text()) == SAMPLE_CASE
