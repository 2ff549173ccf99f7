"""存储相关路由。"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from animedb.packages.catalog.api.v1.schemas.storage import (
    StorageCreate,
    StorageListResponse,
    StorageMutationResponse,
    StorageTypeListResponse,
    StorageUpdate,
)
from animedb.packages.catalog.core.dependencies import get_db
from animedb.packages.catalog.services.storage_service import storage_service

router = APIRouter(prefix="/storages", tags=["storages"])


@router.get("", response_model=StorageListResponse)
def list_storages(db: Session = Depends(get_db)):
    """返回全部存储，最近添加的在前。"""
    return storage_service.list_storages(db)


@router.get("/types", response_model=StorageTypeListResponse)
def list_storage_types():
    """返回可选的存储类型及其路径/读写规则，供前端渲染表单。"""
    return storage_service.list_types()


@router.get("/{storage_id}", response_model=StorageMutationResponse)
def get_storage(storage_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return storage_service.get_storage(db, id=storage_id)


@router.post("", response_model=StorageMutationResponse)
def create_storage(payload: StorageCreate, db: Session = Depends(get_db)):
    return storage_service.create_storage(db, payload.model_dump())


@router.put("/{storage_id}", response_model=StorageMutationResponse)
def update_storage(
    payload: StorageUpdate,
    storage_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
):
    return storage_service.update_storage(db, id=storage_id, payload=payload.model_dump(exclude_unset=True))


@router.delete("/{storage_id}", response_model=StorageMutationResponse)
def delete_storage(storage_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    """删除存储；其中的条目保留，仅解除与该存储的关联。"""
    return storage_service.delete_storage(db, id=storage_id)
