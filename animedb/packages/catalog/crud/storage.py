"""存储 CRUD 封装。"""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from animedb.packages.catalog.crud.base import CRUDBase
from animedb.packages.catalog.models.item import Item
from animedb.packages.catalog.models.storage import Storage


class CRUDStorage(CRUDBase[Storage]):
    def count_items(self, db: Session, storage_id: int) -> int:
        query = db.query(func.count(Item.id)).filter(Item.storage_id == storage_id)
        return int(query.scalar() or 0)

    def delete_detaching_items(self, db: Session, db_obj: Storage) -> int:
        """先解除全部条目与该存储的关联，再删除存储；两步在同一事务内提交。

        返回被解除关联的条目数量。
        """
        try:
            items = db.query(Item).filter(Item.storage_id == db_obj.id).all()
            for item in items:
                item.storage = None
                item.storage_id = None
            db.flush()
            db.delete(db_obj)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return len(items)


storage_crud = CRUDStorage(Storage)
