"""模型包初始化，便于统一导入 ORM 实体并触发模型注册。"""

from animedb.packages.catalog.models.item import Item
from animedb.packages.catalog.models.storage import Storage

__all__ = [
    "Item",
    "Storage",
]
