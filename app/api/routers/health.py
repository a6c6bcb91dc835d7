# app/api/routers/health.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from app.api.deps import get_engine
from app.data.database import ping
from app.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(engine: Engine = Depends(get_engine)):
    if ping(engine):
        return HealthOut(status="ok", database="up")
    return JSONResponse(
        status_code=503,
        content=HealthOut(status="degraded", database="down").model_dump(),
    )
