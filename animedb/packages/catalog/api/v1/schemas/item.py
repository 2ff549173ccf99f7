"""目录条目请求/响应模型。"""

from typing import Optional

from pydantic import BaseModel

from animedb.packages.catalog.api.v1.schemas.common import ResponseEnvelope


class ItemCreate(BaseModel):
    name: Optional[str] = None
    summary: Optional[str] = None
    episodes: Optional[str] = None
    path: Optional[str] = None
    storage_id: Optional[int] = None


class ItemUpdate(ItemCreate):
    pass


class ItemResponseData(BaseModel):
    id: int
    name: str
    summary: Optional[str] = None
    episodes: Optional[str] = None
    path: Optional[str] = None
    storage_id: Optional[int] = None
    storage_name: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


ItemListResponse = ResponseEnvelope[list[ItemResponseData]]
ItemMutationResponse = ResponseEnvelope[Optional[ItemResponseData]]
