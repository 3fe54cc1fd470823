"""Tests for share-file intake."""

import json

import pytest

from secretrecon.config import PRIME
from secretrecon.crypto.errors import (
    CaseFormatError,
    DegenerateShareSetError,
    InconsistentSharesError,
    InvalidDigitError,
    InvalidRadixError,
)
from secretrecon.intake.case import ReconstructionCase, Share, load_case, solve
from secretrecon.intake.fixtures import LARGE_CASE, SAMPLE_CASE

LARGE_SECRET = 79836264049851


def test_parse_sample():
    case = ReconstructionCase.from_dict(SAMPLE_CASE)
    assert (case.n, case.k) == (4, 3)
    assert [s.index for s in case.shares] == [1, 2, 3, 6]
    assert case.shares[1] == Share(index=2, radix=2, digits="111")


def test_sample_points():
    case = ReconstructionCase.from_dict(SAMPLE_CASE)
    assert case.points() == [(1, 4), (2, 7), (3, 12), (6, 39)]


def test_solve_sample():
    result = solve(ReconstructionCase.from_dict(SAMPLE_CASE))
    assert result.secret == 3
    assert result.points_used == [(1, 4), (2, 7), (3, 12)]
    assert result.points_available == 4
    assert result.consistent is True


def test_solve_sample_verified():
    result = solve(ReconstructionCase.from_dict(SAMPLE_CASE), verify=True)
    assert result.secret == 3
    assert result.consistent is True


def test_large_points():
    points = ReconstructionCase.from_dict(LARGE_CASE).points()
    assert points[0] == (1, 995085094601491)
    assert points[5] == (6, 10788619898233492461)
    assert points[9] == (10, 220003896831595324801)


def test_solve_large():
    result = solve(ReconstructionCase.from_dict(LARGE_CASE))
    assert result.secret == LARGE_SECRET
    assert [x for x, _ in result.points_used] == [1, 2, 3, 4, 5, 6, 7]
    assert result.consistent is False


def test_solve_large_verified_rejects():
    with pytest.raises(InconsistentSharesError) as exc_info:
        solve(ReconstructionCase.from_dict(LARGE_CASE), verify=True)
    assert exc_info.value.primary == LARGE_SECRET


def test_exact_k_no_cross_check():
    data = {"keys": {"n": 3, "k": 3}, "1": {"base": "10", "value": "4"},
            "2": {"base": "2", "value": "111"}, "3": {"base": "10", "value": "12"}}
    result = solve(ReconstructionCase.from_dict(data))
    assert result.secret == 3
    assert result.consistent is None


def test_iteration_order_kept():
    data = {"keys": {"n": 4, "k": 3}, "6": {"base": "4", "value": "213"},
            "3": {"base": "10", "value": "12"}, "2": {"base": "2", "value": "111"},
            "1": {"base": "10", "value": "4"}}
    result = solve(ReconstructionCase.from_dict(data))
    assert [x for x, _ in result.points_used] == [6, 3, 2]
    assert result.secret == 3


def test_n_is_informational():
    data = dict(SAMPLE_CASE, keys={"n": 99, "k": 3})
    assert solve(ReconstructionCase.from_dict(data)).secret == 3


def test_integer_base_accepted():
    data = {"keys": {"n": 1, "k": 1}, "1": {"base": 16, "value": "ff"}}
    assert solve(ReconstructionCase.from_dict(data)).secret == 255


def test_non_share_entries_skipped():
    data = dict(SAMPLE_CASE, comment="hello", meta={"author": "x"})
    assert len(ReconstructionCase.from_dict(data).shares) == 4


def test_too_few_shares():
    data = {"keys": {"n": 4, "k": 3}, "1": {"base": "10", "value": "4"}}
    with pytest.raises(DegenerateShareSetError):
        solve(ReconstructionCase.from_dict(data))


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"1": {"base": "10", "value": "4"}},
        {"keys": {"n": 1}},
        {"keys": {"n": 1, "k": 0}},
        {"keys": {"n": 1, "k": 1}, "abc": {"base": "10", "value": "4"}},
        {"keys": {"n": 1, "k": 1}, "0": {"base": "10", "value": "4"}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": 4}},
    ],
)
def test_malformed_cases(data):
    with pytest.raises(CaseFormatError):
        ReconstructionCase.from_dict(data)


@pytest.mark.parametrize("base", ["ten", "1.5", "", "37", 1, 0])
def test_bad_base(base):
    data = {"keys": {"n": 1, "k": 1}, "1": {"base": base, "value": "1"}}
    with pytest.raises(InvalidRadixError):
        ReconstructionCase.from_dict(data)


def test_bad_digit_surfaces_on_decode():
    data = {"keys": {"n": 1, "k": 1}, "1": {"base": "2", "value": "102"}}
    case = ReconstructionCase.from_dict(data)
    with pytest.raises(InvalidDigitError):
        solve(case)


def test_load_case(tmp_path):
    path = tmp_path / "case.json"
    path.write_text(json.dumps(SAMPLE_CASE, indent=4))
    assert solve(load_case(path)).secret == 3


def test_load_case_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(CaseFormatError):
        load_case(path)


def test_digest_stable():
    a = ReconstructionCase.from_dict(SAMPLE_CASE)
    b = ReconstructionCase.from_dict(json.loads(json.dumps(SAMPLE_CASE)))
    assert a.digest() == b.digest()
    assert a.digest() != ReconstructionCase.from_dict(LARGE_CASE).digest()


def test_duplicate_share_index_rejected():
    data = {"keys": {"n": 4, "k": 2}, "1": {"base": "10", "value": "5"},
            "2": {"base": "10", "value": "7"}, "3": {"base": "10", "value": "9"},
            "03": {"base": "10", "value": "9"}}
    with pytest.raises(CaseFormatError):
        ReconstructionCase.from_dict(data)


def test_colliding_extra_shares_reported_not_raised():
    """Extra shares whose x-coordinates collide mod p do not break solve."""
    data = {"keys": {"n": 4, "k": 2}, "1": {"base": "10", "value": "5"},
            "2": {"base": "10", "value": "7"}, "3": {"base": "10", "value": "9"},
            str(PRIME + 3): {"base": "10", "value": "9"}}
    result = solve(ReconstructionCase.from_dict(data))
    assert result.secret == 3
    assert result.consistent is False
    with pytest.raises(DegenerateShareSetError):
        solve(ReconstructionCase.from_dict(data), verify=True)
