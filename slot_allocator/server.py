from typing import List, Optional
import logging
import time

from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .dispatcher import allocate
from .layout import generate_sample_slots
from .schemas import AllocationRequest, AllocationResponse, Slot

logger = logging.getLogger(__name__)

app = FastAPI(title="Parking Slot Allocator")

# CORS (allow browser preflight/OPTIONS for JSON fetches from other origins or ports)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response: Response = await call_next(request)
    elapsed_ms = (time.time() - start_time) * 1000
    logger.info("%s %s - %s - %.2fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.middleware("http")
async def security_headers_middleware(request: Request, call_next):
    response: Response = await call_next(request)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    return response


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/allocate", response_model=AllocationResponse)
def allocate_slot(req: AllocationRequest):
    if not req.available_slots:
        return AllocationResponse(slot=None, algorithm=None, score=None)

    override = req.algorithm.value if req.algorithm else (settings.DEFAULT_ALGORITHM or None)
    try:
        result = allocate(req.available_slots, req.vehicle_type, override)
    except Exception as exc:  # noqa: BLE001
        logger.exception("allocation failed for %r", req.vehicle_type)
        raise HTTPException(status_code=500, detail="Allocation failed") from exc

    if result is None:
        return AllocationResponse(slot=None, algorithm=None, score=None)
    return AllocationResponse(slot=result.slot, algorithm=result.algorithm, score=result.score)


@app.options("/allocate")
def allocate_options():
    # Allow CORS preflight to succeed explicitly if a proxy blocks default handling
    return Response(status_code=204)


# Trailing-slash alias to avoid 405 from proxies adding '/'
@app.post("/allocate/", response_model=AllocationResponse)
def allocate_slot_alias(req: AllocationRequest):
    return allocate_slot(req)


@app.options("/allocate/")
def allocate_options_alias():
    return Response(status_code=204)


@app.get("/allocate")
def allocate_health_get():
    return {"ok": True, "endpoint": "/allocate", "method": "GET", "message": "Use POST with JSON body to allocate."}


@app.get("/layout/sample", response_model=List[Slot])
def sample_layout(
    seed: Optional[int] = None,
    occupancy: float = Query(0.3, ge=0.0, le=1.0),
    per_zone: int = Query(10, ge=1, le=99),
):
    return generate_sample_slots(per_zone=per_zone, occupancy=occupancy, seed=seed)
