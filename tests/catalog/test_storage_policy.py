"""存储类型策略的单元测试。"""

import pytest

from animedb.packages.catalog.core import storage_policy
from animedb.packages.catalog.core.constants import PATH_REQUIRED_MESSAGE
from animedb.packages.catalog.core.enums import StorageTypeEnum
from animedb.packages.catalog.core.exceptions import StorageIntegrityError
from animedb.packages.catalog.core.storage_policy import FieldViolation
from animedb.packages.catalog.models.storage import Storage


def test_writable_and_readable_types():
    assert storage_policy.writable_types() == {StorageTypeEnum.FOLDER, StorageTypeEnum.EXTERNAL}
    assert storage_policy.readable_types() == {
        StorageTypeEnum.FOLDER,
        StorageTypeEnum.EXTERNAL,
        StorageTypeEnum.EXTERNAL_READONLY,
    }
    assert StorageTypeEnum.VIDEO not in storage_policy.readable_types()


@pytest.mark.parametrize(
    "storage_type, required",
    [
        ("folder", True),
        ("external", True),
        ("external-readonly", False),
        ("video", False),
        (StorageTypeEnum.FOLDER, True),
        (StorageTypeEnum.VIDEO, False),
    ],
)
def test_is_path_required(storage_type, required):
    assert storage_policy.is_path_required(storage_type) is required


def test_validate_requires_path_for_writable_type():
    violations = storage_policy.validate({"type": "folder", "path": ""})

    assert violations == [FieldViolation(field="path", message=PATH_REQUIRED_MESSAGE)]
    assert violations[0].to_dict() == {
        "field": "path",
        "message": "Path is required to fill for current type of storage",
    }


@pytest.mark.parametrize(
    "record",
    [
        {"type": "folder", "path": "/mnt/x"},
        {"type": "external", "path": "E:\\anime"},
        {"type": "video", "path": ""},
        {"type": "external-readonly", "path": None},
    ],
)
def test_validate_accepts(record):
    assert storage_policy.validate(record) == []


def test_validate_accepts_orm_entities():
    assert len(storage_policy.validate(Storage(name="HDD", type="external", path=None))) == 1
    assert storage_policy.validate(Storage(name="Shelf", type="video", path=None)) == []


def test_type_titles():
    assert storage_policy.type_title("folder") == "Folder on computer (local/network)"
    assert storage_policy.type_title("external") == "External storage (HDD/Flash/SD)"
    assert storage_policy.type_title("external-readonly") == "External storage read-only (CD/DVD)"
    assert storage_policy.type_title(StorageTypeEnum.VIDEO) == "Video storage (DVD/BD/VHS)"


@pytest.mark.parametrize("storage_type", ["floppy", "", None])
def test_type_title_rejects_unknown_type(storage_type):
    with pytest.raises(StorageIntegrityError):
        storage_policy.type_title(storage_type)


def test_type_tables_cover_every_storage_type():
    assert set(storage_policy.TYPE_TITLES) == set(StorageTypeEnum)
    assert storage_policy.WRITABLE_TYPES <= set(StorageTypeEnum)
    assert storage_policy.READABLE_TYPES <= set(StorageTypeEnum)
    # 可写的存储一定可读
    assert storage_policy.WRITABLE_TYPES <= storage_policy.READABLE_TYPES


@pytest.mark.parametrize("storage_type", list(StorageTypeEnum))
def test_path_rule_follows_writable_set(storage_type):
    assert storage_policy.is_path_required(storage_type) is storage_policy.is_writable(storage_type)
    assert storage_policy.is_writable(storage_type) is (storage_type in storage_policy.writable_types())


def test_type_column_fits_every_storage_type():
    # PostgreSQL 会按列宽截断报错，SQLite 不检查，所以直接核对列定义
    column_length = Storage.__table__.c.type.type.length
    assert column_length >= max(len(member.value) for member in StorageTypeEnum)
