"""SecretRecon FastAPI application.

Endpoints:
- POST /decode        – decode one digit string into a field element
- POST /interpolate   – Lagrange-interpolate already decoded points at x=0
- POST /reconstruct   – solve a share file (``{"keys": ..., "1": ...}``)
- GET  /audit         – hash-chained request log
- GET  /health
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from secretrecon.config import PRIME
from secretrecon.crypto import codec, shamir
from secretrecon.crypto.errors import (
    InconsistentSharesError,
    InvalidDigitError,
    ReconstructionError,
)
from secretrecon.intake.case import ReconstructionCase, ReconstructionResult, solve
from secretrecon.service.audit import AuditLog

# ------ request models (module-level for Pydantic / FastAPI compat) ------


class DecodeRequest(BaseModel):
    digits: str
    radix: int


class InterpolateRequest(BaseModel):
    # [[x, y], ...]; big values may be sent as decimal strings
    points: List[Tuple[Union[int, str], Union[int, str]]]
    # threshold; defaults to len(points)
    k: Optional[int] = None


class AuditResponse(BaseModel):
    entries: List[Dict[str, Any]]
    chain_valid: bool


class ServiceState:
    """Per-app mutable state."""

    def __init__(self) -> None:
        self.audit = AuditLog()


def _as_int(v: Union[int, str]) -> int:
    if isinstance(v, int):
        return v
    try:
        return codec.parse(v, 10)
    except InvalidDigitError as exc:
        raise HTTPException(422, f"Not an integer: {v!r}") from exc


def create_app(state: ServiceState | None = None) -> FastAPI:
    """Factory that creates a reconstruction service app."""
    if state is None:
        state = ServiceState()

    app = FastAPI(title="SecretRecon")
    app.state.recon = state

    def _reject(event: str, data: Dict[str, Any], exc: ReconstructionError) -> HTTPException:
        state.audit.append("reject", {**data, "op": event, "error": type(exc).__name__})
        status = 409 if isinstance(exc, InconsistentSharesError) else 422
        return HTTPException(status, str(exc))

    @app.post("/decode")
    async def decode(req: DecodeRequest):
        try:
            value = codec.decode(req.digits, req.radix)
        except ReconstructionError as exc:
            raise _reject("decode", {"radix": req.radix}, exc) from exc
        state.audit.append("decode", {"radix": req.radix, "length": len(req.digits)})
        return {"value": value}

    @app.post("/interpolate")
    async def interpolate(req: InterpolateRequest):
        points = [(_as_int(x), _as_int(y)) for x, y in req.points]
        xs = [x for x, _ in points]
        k = len(points) if req.k is None else req.k
        try:
            secret = shamir.reconstruct(points, k)
        except ReconstructionError as exc:
            raise _reject("interpolate", {"x": xs, "k": k}, exc) from exc
        state.audit.append("interpolate", {"x": xs, "k": k})
        return {"secret": secret}

    @app.post("/reconstruct", response_model=ReconstructionResult)
    async def reconstruct(body: Dict[str, Any], verify: bool = False):
        try:
            case = ReconstructionCase.from_dict(body)
        except ReconstructionError as exc:
            raise _reject("reconstruct", {"verify": verify}, exc) from exc
        data = {"case": case.digest(), "n": case.n, "k": case.k, "verify": verify}
        try:
            result = solve(case, verify=verify)
        except ReconstructionError as exc:
            raise _reject("reconstruct", data, exc) from exc
        state.audit.append(
            "reconstruct",
            {**data, "x": [x for x, _ in result.points_used], "consistent": result.consistent},
        )
        return result

    @app.get("/audit", response_model=AuditResponse)
    async def audit():
        return AuditResponse(entries=state.audit.entries(), chain_valid=state.audit.verify_chain())

    @app.get("/health")
    async def health():
        return {"status": "ok", "prime_bits": PRIME.bit_length()}

    return app


app = create_app()
