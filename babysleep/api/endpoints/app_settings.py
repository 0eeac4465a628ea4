"""
Persisted user preference endpoints.
"""

from fastapi import APIRouter, Depends, Path
from sqlmodel import Session

from babysleep.db.session import get_db
from babysleep.schemas.app_setting import AppSettingResponse, AppSettingUpdate
from babysleep.services.app_setting_service import AppSettingService

router = APIRouter()


@router.get("", summary="Get all settings as a key/value map.", response_model=dict[str, str], )
def get_settings(db: Session = Depends(get_db)):
    return AppSettingService(db).get_all()


@router.get("/{key}", summary="Get a single setting.", response_model=AppSettingResponse, )
def get_setting(key: str = Path(..., max_length=100), db: Session = Depends(get_db)):
    return AppSettingService(db).get(key)


@router.put("/{key}", summary="Create or overwrite a setting.", response_model=AppSettingResponse, )
def put_setting(data: AppSettingUpdate, key: str = Path(..., max_length=100), db: Session = Depends(get_db)):
    return AppSettingService(db).put(key, data.value)


@router.delete("/{key}", summary="Delete a setting.")
def delete_setting(key: str = Path(..., max_length=100), db: Session = Depends(get_db)):
    AppSettingService(db).delete(key)
    return { "message": "Setting deleted" }
