"""存储服务：提供存储的增删改查，并在入库前按存储类型策略校验记录。"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from animedb.packages.catalog.core import storage_policy
from animedb.packages.catalog.core.constants import (
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_OK,
    HTTP_STATUS_UNPROCESSABLE_ENTITY,
    STORAGE_NAME_MAX_LENGTH,
    STORAGE_NOT_FOUND_MESSAGE,
)
from animedb.packages.catalog.core.enums import StorageTypeEnum
from animedb.packages.catalog.core.exceptions import AppException
from animedb.packages.catalog.core.logger import logger
from animedb.packages.catalog.core.responses import create_response
from animedb.packages.catalog.core.storage_policy import FieldViolation
from animedb.packages.catalog.core.timezone import format_datetime
from animedb.packages.catalog.crud.storage import storage_crud
from animedb.packages.catalog.models.storage import Storage

NOT_BLANK_MESSAGE = "This value should not be blank."
INVALID_CHOICE_MESSAGE = "The value you selected is not a valid choice."
TOO_LONG_MESSAGE = "This value is too long. It should have {limit} characters or less."

EDITABLE_FIELDS = ("name", "description", "type", "path")


class StorageService:
    # ----------------------------
    # 列表与详情
    # ----------------------------
    def list_storages(self, db: Session) -> Dict[str, Any]:
        items = storage_crud.list_all(db)
        data = [self._serialize(db, item) for item in items]
        return create_response("Storages fetched", data, HTTP_STATUS_OK)

    def get_storage(self, db: Session, *, id: int) -> Dict[str, Any]:
        storage = self._get_or_404(db, id)
        return create_response("Storage fetched", self._serialize(db, storage), HTTP_STATUS_OK)

    def list_types(self) -> Dict[str, Any]:
        data = [
            {
                "value": member.value,
                "title": storage_policy.type_title(member),
                "path_required": storage_policy.is_path_required(member),
                "writable": storage_policy.is_writable(member),
                "readable": storage_policy.is_readable(member),
            }
            for member in StorageTypeEnum
        ]
        return create_response("Storage types fetched", data, HTTP_STATUS_OK)

    # ----------------------------
    # 新增 / 编辑 / 删除
    # ----------------------------
    def create_storage(self, db: Session, payload: dict) -> Dict[str, Any]:
        form = self._normalize(payload)
        self._ensure_valid(form)

        created = storage_crud.create(db, form)
        logger.info("Storage %s (%s) created", created.id, created.type)
        return create_response("Storage created", self._serialize(db, created), HTTP_STATUS_OK)

    def update_storage(self, db: Session, *, id: int, payload: dict) -> Dict[str, Any]:
        storage = self._get_or_404(db, id)

        # 未提交的字段沿用原值，再整体重新校验
        merged = {field: getattr(storage, field) for field in EDITABLE_FIELDS}
        merged.update(self._normalize(payload, only=payload.keys()))
        form = self._normalize(merged)
        self._ensure_valid(form)

        for key, value in form.items():
            setattr(storage, key, value)
        saved = storage_crud.save(db, storage)
        logger.info("Storage %s updated", saved.id)
        return create_response("Storage updated", self._serialize(db, saved), HTTP_STATUS_OK)

    def delete_storage(self, db: Session, *, id: int) -> Dict[str, Any]:
        storage = self._get_or_404(db, id)
        detached = storage_crud.delete_detaching_items(db, storage)
        logger.info("Storage %s deleted, %s item(s) detached", id, detached)
        return create_response("Storage deleted", None, HTTP_STATUS_OK)

    # ----------------------------
    # 校验
    # ----------------------------
    def validate(self, form: dict) -> List[FieldViolation]:
        """合并字段级校验与存储类型策略校验的结果。"""
        violations: List[FieldViolation] = []
        name = form.get("name")
        if not name:
            violations.append(FieldViolation(field="name", message=NOT_BLANK_MESSAGE))
        elif len(name) > STORAGE_NAME_MAX_LENGTH:
            violations.append(
                FieldViolation(field="name", message=TOO_LONG_MESSAGE.format(limit=STORAGE_NAME_MAX_LENGTH))
            )

        storage_type = form.get("type")
        if not storage_type:
            violations.append(FieldViolation(field="type", message=NOT_BLANK_MESSAGE))
        elif storage_type not in {member.value for member in StorageTypeEnum}:
            violations.append(FieldViolation(field="type", message=INVALID_CHOICE_MESSAGE))

        violations.extend(storage_policy.validate(form))
        return violations

    def _ensure_valid(self, form: dict) -> None:
        violations = self.validate(form)
        if violations:
            raise AppException(
                "Storage is invalid",
                HTTP_STATUS_UNPROCESSABLE_ENTITY,
                data={"form": form, "violations": [v.to_dict() for v in violations]},
            )

    # ----------------------------
    # 工具方法
    # ----------------------------
    def _get_or_404(self, db: Session, id: int) -> Storage:
        storage = storage_crud.get(db, id)
        if storage is None:
            raise AppException(STORAGE_NOT_FOUND_MESSAGE, HTTP_STATUS_NOT_FOUND)
        return storage

    def _normalize(self, payload: dict, *, only: Optional[Any] = None) -> dict:
        def _opt(x: Optional[str]) -> Optional[str]:
            if x is None:
                return None
            t = str(x).strip()
            return t or None

        keys = [key for key in EDITABLE_FIELDS if only is None or key in only]
        result: dict = {}
        for key in keys:
            value = _opt(payload.get(key))
            if key == "description":
                value = value or ""
            result[key] = value
        return result

    def _serialize(self, db: Session, item: Storage) -> dict[str, Any]:
        return {
            "id": item.id,
            "name": item.name,
            "description": item.description or "",
            "type": item.type,
            "type_title": storage_policy.type_title(item.type),
            "path": item.path,
            "path_required": storage_policy.is_path_required(item.type),
            "writable": storage_policy.is_writable(item.type),
            "readable": storage_policy.is_readable(item.type),
            "item_count": storage_crud.count_items(db, item.id),
            "created_at": format_datetime(item.create_time),
            "updated_at": format_datetime(item.update_time),
        }


storage_service = StorageService()
