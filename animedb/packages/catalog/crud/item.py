"""目录条目 CRUD 封装。"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from animedb.packages.catalog.crud.base import CRUDBase
from animedb.packages.catalog.models.item import Item


class CRUDItem(CRUDBase[Item]):
    def list_filtered(self, db: Session, *, storage_id: Optional[int] = None) -> List[Item]:
        query = self.query(db)
        if storage_id is not None:
            query = query.filter(self.model.storage_id == storage_id)
        return query.order_by(self.model.id.desc()).all()


item_crud = CRUDItem(Item)
