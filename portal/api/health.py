"""
Health check endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from datetime import datetime, timezone

from portal.api.deps import get_source
from portal.database import get_db
from portal.config import settings
from portal.services.erp_client import RecordSource

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    db: Session = Depends(get_db),
    source: RecordSource = Depends(get_source)
):
    """
    Health check endpoint
    
    Checks:
    - Service status
    - Database connectivity
    - ERP connectivity
    """
    # Check database
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"
    
    # Check ERP
    erp_status = await source.ping()
    
    overall_status = "healthy" if (db_status == "healthy" and erp_status.startswith("healthy")) else "unhealthy"
    
    return {
        "service": settings.SERVICE_NAME,
        "status": overall_status,
        "database": db_status,
        "erp": erp_status,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/")
def root():
    """Root endpoint"""
    return {
        "service": settings.SERVICE_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }
