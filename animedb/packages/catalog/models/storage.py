"""存储模型：描述保存目录条目的物理或逻辑位置（文件夹、移动硬盘、光盘、录像介质）。"""

from typing import List, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from animedb.packages.catalog.core.constants import STORAGE_NAME_MAX_LENGTH
from animedb.packages.catalog.models.base import Base, TimestampMixin


class Storage(TimestampMixin, Base):
    """存储实体。

    说明：
    - ``type`` 取值见 ``StorageTypeEnum``，路径是否必填由存储类型策略决定；
    - ``items`` 仅是反向引用，条目归条目自己管理：删除存储时只解除关联，不级联删除条目。
    """

    __tablename__ = "storages"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(STORAGE_NAME_MAX_LENGTH))
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    type: Mapped[str] = mapped_column(String(32))
    path: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    items: Mapped[List["Item"]] = relationship(
        "Item",
        back_populates="storage",
    )
