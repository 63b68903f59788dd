from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, text

from tasktrack.db.session import get_session

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_app():
    return {"ok": True, "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/db")
def health_db(db: Session = Depends(get_session)):
    # Migration is a deployment concern. Runtime only verifies DB connectivity.
    try:
        db.exec(text("SELECT 1"))
    except Exception:
        raise HTTPException(status_code=500, detail="Database connection failed")
    return {"ok": True}
