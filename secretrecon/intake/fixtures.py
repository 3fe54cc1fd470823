"""Sample share files.

``SAMPLE_CASE`` lies on f(x) = x^2 + 3, so its secret is 3.
``LARGE_CASE`` carries long base-3..16 values; its first seven shares give
79836264049851, but not all ten shares lie on one polynomial.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

SAMPLE_CASE: Dict[str, Any] = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}

LARGE_CASE: Dict[str, Any] = {
    "keys": {"n": 10, "k": 7},
    "1": {"base": "6", "value": "13444211440455345511"},
    "2": {"base": "15", "value": "aed7015a346d63"},
    "3": {"base": "15", "value": "6aeeb69631c227c"},
    "4": {"base": "16", "value": "e1b5e05623d881f"},
    "5": {"base": "8", "value": "316034514573652620673"},
    "6": {"base": "3", "value": "2122212201122002221120200210011020220200"},
    "7": {"base": "3", "value": "20120221122211000100210021102001201112121"},
    "8": {"base": "6", "value": "20220554335330240002224253"},
    "9": {"base": "12", "value": "45153788322a1255483"},
    "10": {"base": "7", "value": "1101613130313526312514143"},
}

# relative path -> case
FIXTURES: Dict[str, Dict[str, Any]] = {
    "testcase1.json": SAMPLE_CASE,
    "testcase2.json": LARGE_CASE,
    "examples/sampleTest.json": SAMPLE_CASE,
}


def write_fixtures(directory: Union[str, Path], overwrite: bool = False) -> List[Path]:
    """Write the sample share files under *directory*.

    Existing files are left alone unless *overwrite* is set.  Returns the
    paths that were written.
    """
    root = Path(directory)
    written: List[Path] = []
    for rel, case in FIXTURES.items():
        path = root / rel
        if path.exists() and not overwrite:
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(case, indent=4), encoding="utf-8")
        written.append(path)
    return written
