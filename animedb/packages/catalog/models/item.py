"""目录条目模型：一部动画作品及其所在存储。"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from animedb.packages.catalog.core.constants import ITEM_NAME_MAX_LENGTH
from animedb.packages.catalog.models.base import Base, TimestampMixin


class Item(TimestampMixin, Base):
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(ITEM_NAME_MAX_LENGTH), index=True)
    summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    episodes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # 条目在存储内的位置
    path: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # 存储被删除时置空，条目保留
    storage_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("storages.id", ondelete="SET NULL"), nullable=True, index=True
    )

    storage: Mapped[Optional["Storage"]] = relationship("Storage", back_populates="items")
