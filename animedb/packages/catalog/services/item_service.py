"""目录条目服务：维护条目及其所在存储。"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from animedb.packages.catalog.core.constants import (
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_OK,
    HTTP_STATUS_UNPROCESSABLE_ENTITY,
    ITEM_NAME_MAX_LENGTH,
    ITEM_NOT_FOUND_MESSAGE,
    STORAGE_NOT_FOUND_MESSAGE,
)
from animedb.packages.catalog.core.exceptions import AppException
from animedb.packages.catalog.core.logger import logger
from animedb.packages.catalog.core.responses import create_response
from animedb.packages.catalog.core.timezone import format_datetime
from animedb.packages.catalog.crud.item import item_crud
from animedb.packages.catalog.crud.storage import storage_crud
from animedb.packages.catalog.models.item import Item
from animedb.packages.catalog.services.storage_service import NOT_BLANK_MESSAGE, TOO_LONG_MESSAGE

EDITABLE_FIELDS = ("name", "summary", "episodes", "path", "storage_id")


class ItemService:
    def list_items(self, db: Session, *, storage_id: Optional[int] = None) -> Dict[str, Any]:
        items = item_crud.list_filtered(db, storage_id=storage_id)
        return create_response("Items fetched", [self._serialize(item) for item in items], HTTP_STATUS_OK)

    def get_item(self, db: Session, *, id: int) -> Dict[str, Any]:
        return create_response("Item fetched", self._serialize(self._get_or_404(db, id)), HTTP_STATUS_OK)

    def create_item(self, db: Session, payload: dict) -> Dict[str, Any]:
        form = self._normalize(payload)
        self._ensure_valid(db, form)
        created = item_crud.create(db, form)
        logger.info("Item %s created", created.id)
        return create_response("Item created", self._serialize(created), HTTP_STATUS_OK)

    def update_item(self, db: Session, *, id: int, payload: dict) -> Dict[str, Any]:
        item = self._get_or_404(db, id)
        merged = {field: getattr(item, field) for field in EDITABLE_FIELDS}
        merged.update({key: payload[key] for key in EDITABLE_FIELDS if key in payload})
        form = self._normalize(merged)
        self._ensure_valid(db, form)

        for key, value in form.items():
            setattr(item, key, value)
        saved = item_crud.save(db, item)
        return create_response("Item updated", self._serialize(saved), HTTP_STATUS_OK)

    def delete_item(self, db: Session, *, id: int) -> Dict[str, Any]:
        item = self._get_or_404(db, id)
        item_crud.hard_delete(db, item)
        logger.info("Item %s deleted", id)
        return create_response("Item deleted", None, HTTP_STATUS_OK)

    def _ensure_valid(self, db: Session, form: dict) -> None:
        violations = []
        name = form.get("name")
        if not name:
            violations.append({"field": "name", "message": NOT_BLANK_MESSAGE})
        elif len(name) > ITEM_NAME_MAX_LENGTH:
            violations.append({"field": "name", "message": TOO_LONG_MESSAGE.format(limit=ITEM_NAME_MAX_LENGTH)})
        storage_id = form.get("storage_id")
        if storage_id is not None and storage_crud.get(db, storage_id) is None:
            violations.append({"field": "storage_id", "message": STORAGE_NOT_FOUND_MESSAGE})
        if violations:
            raise AppException(
                "Item is invalid",
                HTTP_STATUS_UNPROCESSABLE_ENTITY,
                data={"form": form, "violations": violations},
            )

    def _get_or_404(self, db: Session, id: int) -> Item:
        item = item_crud.get(db, id)
        if item is None:
            raise AppException(ITEM_NOT_FOUND_MESSAGE, HTTP_STATUS_NOT_FOUND)
        return item

    def _normalize(self, payload: dict) -> dict:
        result: dict = {}
        for key in EDITABLE_FIELDS:
            value = payload.get(key)
            if isinstance(value, str):
                value = value.strip() or None
            result[key] = value
        return result

    def _serialize(self, item: Item) -> dict[str, Any]:
        return {
            "id": item.id,
            "name": item.name,
            "summary": item.summary,
            "episodes": item.episodes,
            "path": item.path,
            "storage_id": item.storage_id,
            "storage_name": item.storage.name if item.storage else None,
            "created_at": format_datetime(item.create_time),
            "updated_at": format_datetime(item.update_time),
        }


item_service = ItemService()
