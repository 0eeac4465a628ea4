"""
Health check and display configuration endpoints.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, text

from babysleep.core.config import settings
from babysleep.db.session import get_db
from babysleep.schemas.app_setting import AppConfigResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Database connectivity check.")
def health_check(db: Session = Depends(get_db)):
    try:
        db.exec(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            content={ "status": "error", "message": str(e) })
    return { "status": "ok" }


@router.get("/config", summary="Display configuration.", response_model=AppConfigResponse)
def get_config():
    return AppConfigResponse(language=settings.LANGUAGE, baby_name=settings.BABY_NAME)
