"""FastAPI surface for the parity oracle.

Endpoints:
- GET /health
- POST /is-odd  { "value": 7 }
"""
from __future__ import annotations
import logging
import os
import time
from typing import Any

import httpx
import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from parity_oracle.client import ParityOracle
from parity_oracle.common.errors import ErrorKind, OracleError
from parity_oracle.common.logging_setup import setup_logging
from parity_oracle.config import OracleSettings

LOGGER = logging.getLogger("parity_oracle.serve.app")
setup_logging()

SETTINGS = OracleSettings.from_env()

class IsOddIn(BaseModel):
    value: Any = None

class IsOddOut(BaseModel):
    value: Any
    odd: bool
    latency_ms: int

app = FastAPI()

def get_oracle() -> ParityOracle:
    return ParityOracle(SETTINGS)

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": SETTINGS.model}

@app.post("/is-odd", response_model=IsOddOut)
async def is_odd_endpoint(body: IsOddIn) -> IsOddOut:
    start = time.time()
    try:
        odd = await get_oracle().is_odd(body.value)
    except OracleError as e:
        if e.kind is ErrorKind.VALIDATION:
            raise HTTPException(status_code=422, detail=e.message)
        raise HTTPException(status_code=502, detail=e.message)
    except httpx.HTTPError:
        # already logged by the client
        raise HTTPException(status_code=502, detail="Upstream completion error")
    except Exception:
        raise HTTPException(status_code=500, detail="Malformed completion response")

    latency = int((time.time() - start) * 1000)
    return IsOddOut(value=body.value, odd=odd, latency_ms=latency)

def main() -> None:
    host = os.getenv("PARITY_ORACLE_HOST", "127.0.0.1")
    port = int(os.getenv("PARITY_ORACLE_PORT", "8000"))
    LOGGER.info("Serving parity oracle on %s:%s (model=%s)", host, port, SETTINGS.model)
    uvicorn.run("parity_oracle.serve.fastapi_app:app", host=host, port=port)

if __name__ == "__main__":
    main()
