"""Global configuration for SecretRecon."""

import os

# ---------- Finite-field prime (secp256k1 field prime) ----------
# All share arithmetic is mod PRIME.
PRIME = 2**256 - 2**32 - 977

# ---------- Share value encoding ----------
MIN_RADIX = 2
MAX_RADIX = 36   # 0-9 then a-z

# ---------- Demo driver ----------
# Where the sample share files are written / read when no paths are given.
FIXTURE_DIR = os.environ.get("SECRETRECON_FIXTURE_DIR", ".")
FIXTURE_FILES = ["testcase1.json", "testcase2.json"]

# When set, the demo posts cases to a running service instead of solving
# them in-process, e.g. "http://localhost:8000".
SERVICE_URL = os.environ.get("SECRETRECON_SERVICE_URL", "")
SERVICE_TIMEOUT = float(os.environ.get("SECRETRECON_SERVICE_TIMEOUT", "10.0"))
