#!/usr/bin/env python3
"""SecretRecon console driver.

Usage:
    python -m secretrecon.demo.run_demo [FILE ...]

Without arguments the sample share files are written to
``SECRETRECON_FIXTURE_DIR`` (if missing) and ``testcase1.json`` /
``testcase2.json`` are processed.  For every file the script:
1. Parses the share file and prints n, k and the polynomial degree.
2. Decodes every root and prints it.
3. Reconstructs the secret from the first k roots.
4. Cross-checks against the last k roots when extra roots exist.

A file that fails is reported and skipped.  With ``SECRETRECON_SERVICE_URL``
set, files are posted to a running service instead of solved in-process.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import httpx

from secretrecon.config import FIXTURE_DIR, FIXTURE_FILES, SERVICE_TIMEOUT, SERVICE_URL
from secretrecon.crypto.errors import ReconstructionError
from secretrecon.intake.case import (
    ReconstructionCase,
    ReconstructionResult,
    load_case,
    solve,
)
from secretrecon.intake.fixtures import write_fixtures


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def _solve_remote(path: Path, client: httpx.Client) -> ReconstructionResult:
    body = json.loads(path.read_text(encoding="utf-8"))
    resp = client.post(f"{SERVICE_URL}/reconstruct", json=body)
    if resp.status_code != 200:
        detail = resp.json().get("detail", resp.text)
        raise ReconstructionError(f"HTTP {resp.status_code}: {detail}")
    return ReconstructionResult.model_validate(resp.json())


def _print_case(case: ReconstructionCase) -> None:
    print(f"   n (total roots provided): {case.n}")
    print(f"   k (minimum roots required): {case.k}")
    print(f"   Polynomial degree m = k - 1 = {case.k - 1}")
    for share in case.shares:
        x, y = share.point()
        print(f"   Root {x}: base={share.radix}, encoded={share.digits!r}, decoded={y}")


def process_file(
    path: Path, number: int, client: Optional[httpx.Client] = None
) -> Optional[int]:
    """Solve one share file; return its secret or None on failure."""
    banner(f"TEST CASE {number}: {path}")
    try:
        case = load_case(path)
        _print_case(case)
        if client is not None:
            result = _solve_remote(path, client)
        else:
            result = solve(case)
    except (ReconstructionError, OSError, json.JSONDecodeError, httpx.HTTPError) as exc:
        print(f"   Error processing {path}: {exc}", file=sys.stderr)
        return None

    print(f"\n   Total points available: {result.points_available}")
    print(f"   Using first {result.k} points:")
    for x, y in result.points_used:
        print(f"     ({x}, {y})")
    print(f"\n   SECRET (constant term c): {result.secret}")
    if result.consistent is None:
        print("   Cross-check: skipped (no extra roots)")
    elif result.consistent:
        print("   Cross-check: first k and last k roots agree")
    else:
        print("   Cross-check: MISMATCH, not all roots lie on one polynomial")
    return result.secret


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        paths = [Path(a) for a in args]
    else:
        for written in write_fixtures(FIXTURE_DIR):
            print(f"Created {written}")
        paths = [Path(FIXTURE_DIR) / name for name in FIXTURE_FILES]

    client = httpx.Client(timeout=SERVICE_TIMEOUT) if SERVICE_URL else None
    try:
        recovered = [process_file(p, i, client) for i, p in enumerate(paths, start=1)]
    finally:
        if client is not None:
            client.close()

    banner("FINAL RESULTS")
    for i, (path, secret) in enumerate(zip(paths, recovered), start=1):
        shown = secret if secret is not None else "failed"
        print(f"   Test Case {i} ({path.name}) Secret: {shown}")

    return 0 if any(s is not None for s in recovered) else 1


if __name__ == "__main__":
    sys.exit(main())
