"""存储类型策略：按存储类型决定路径是否必填、能否读写，并在入库前校验存储记录。

类型相关的映射表都以 ``StorageTypeEnum`` 为键；新增类型时需要同步补齐下面的映射，
``tests/catalog/test_storage_policy.py`` 会校验映射覆盖了全部枚举成员。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, FrozenSet, List, Mapping, Union

from animedb.packages.catalog.core.constants import PATH_REQUIRED_MESSAGE
from animedb.packages.catalog.core.enums import StorageTypeEnum
from animedb.packages.catalog.core.exceptions import StorageIntegrityError

StorageTypeLike = Union[StorageTypeEnum, str, None]

WRITABLE_TYPES: FrozenSet[StorageTypeEnum] = frozenset(
    {StorageTypeEnum.FOLDER, StorageTypeEnum.EXTERNAL}
)

# 视频存储代表 DVD/BD/VHS 等实体介质，只登记元数据，没有可读取的文件路径
READABLE_TYPES: FrozenSet[StorageTypeEnum] = frozenset(
    {StorageTypeEnum.FOLDER, StorageTypeEnum.EXTERNAL, StorageTypeEnum.EXTERNAL_READONLY}
)

TYPE_TITLES: Mapping[StorageTypeEnum, str] = {
    StorageTypeEnum.FOLDER: "Folder on computer (local/network)",
    StorageTypeEnum.EXTERNAL: "External storage (HDD/Flash/SD)",
    StorageTypeEnum.EXTERNAL_READONLY: "External storage read-only (CD/DVD)",
    StorageTypeEnum.VIDEO: "Video storage (DVD/BD/VHS)",
}


@dataclass(frozen=True)
class FieldViolation:
    """字段级校验错误，``field`` 指向出错的表单字段。"""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _coerce(storage_type: StorageTypeLike) -> StorageTypeEnum | None:
    if isinstance(storage_type, StorageTypeEnum):
        return storage_type
    try:
        return StorageTypeEnum(storage_type)
    except ValueError:
        return None


def writable_types() -> FrozenSet[StorageTypeEnum]:
    return WRITABLE_TYPES


def readable_types() -> FrozenSet[StorageTypeEnum]:
    return READABLE_TYPES


def is_writable(storage_type: StorageTypeLike) -> bool:
    return _coerce(storage_type) in writable_types()


def is_path_required(storage_type: StorageTypeLike) -> bool:
    # 路径必填与可写同源
    return is_writable(storage_type)


def is_readable(storage_type: StorageTypeLike) -> bool:
    return _coerce(storage_type) in READABLE_TYPES


def type_title(storage_type: StorageTypeLike) -> str:
    """返回存储类型的展示名称；未知类型说明枚举约束被绕过，直接报错。"""
    member = _coerce(storage_type)
    if member is None:
        raise StorageIntegrityError(f"Unknown storage type: {storage_type!r}")
    return TYPE_TITLES[member]


def validate(record: Any) -> List[FieldViolation]:
    """校验存储记录的路径规则。

    ``record`` 可以是 ORM 实体、请求模型或字典，只需提供 ``type`` 与 ``path``。
    """
    if isinstance(record, Mapping):
        storage_type = record.get("type")
        path = record.get("path")
    else:
        storage_type = getattr(record, "type", None)
        path = getattr(record, "path", None)

    if is_path_required(storage_type) and not path:
        return [FieldViolation(field="path", message=PATH_REQUIRED_MESSAGE)]
    return []
