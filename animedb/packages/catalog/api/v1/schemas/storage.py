"""存储管理配套的请求/响应模型。

``type`` 保持普通字符串，取值合法性与路径规则统一由存储服务校验，
这样所有字段错误能合并成同一份违规列表返回给前端。
"""

from typing import Optional

from pydantic import BaseModel

from animedb.packages.catalog.api.v1.schemas.common import ResponseEnvelope


class StorageCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    path: Optional[str] = None


class StorageUpdate(StorageCreate):
    """编辑时未提交的字段沿用原值。"""


class StorageResponseData(BaseModel):
    id: int
    name: str
    description: str = ""
    type: str
    type_title: str
    path: Optional[str] = None
    path_required: bool
    writable: bool
    readable: bool
    item_count: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class StorageTypeData(BaseModel):
    value: str
    title: str
    path_required: bool
    writable: bool
    readable: bool


StorageListResponse = ResponseEnvelope[list[StorageResponseData]]
StorageMutationResponse = ResponseEnvelope[Optional[StorageResponseData]]
StorageTypeListResponse = ResponseEnvelope[list[StorageTypeData]]
