"""目录条目路由。"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from animedb.packages.catalog.api.v1.schemas.item import (
    ItemCreate,
    ItemListResponse,
    ItemMutationResponse,
    ItemUpdate,
)
from animedb.packages.catalog.core.dependencies import get_db
from animedb.packages.catalog.services.item_service import item_service

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=ItemListResponse)
def list_items(
    storage_id: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    return item_service.list_items(db, storage_id=storage_id)


@router.get("/{item_id}", response_model=ItemMutationResponse)
def get_item(item_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return item_service.get_item(db, id=item_id)


@router.post("", response_model=ItemMutationResponse)
def create_item(payload: ItemCreate, db: Session = Depends(get_db)):
    return item_service.create_item(db, payload.model_dump())


@router.put("/{item_id}", response_model=ItemMutationResponse)
def update_item(
    payload: ItemUpdate,
    item_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
):
    return item_service.update_item(db, id=item_id, payload=payload.model_dump(exclude_unset=True))


@router.delete("/{item_id}", response_model=ItemMutationResponse)
def delete_item(item_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return item_service.delete_item(db, id=item_id)
