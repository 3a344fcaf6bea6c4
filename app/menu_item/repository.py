from typing import List, Optional

from sqlalchemy.orm import Session

from app.menu_item.models import MenuItem


class MenuItemRepository:
    def __init__(self, db: Session):
        self.db = db

    def create_many(self, items: List[dict]) -> List[MenuItem]:
        """Insert every item in one transaction; nothing is kept if any row fails."""
        menu_items = [MenuItem(**item) for item in items]
        try:
            self.db.add_all(menu_items)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        for menu_item in menu_items:
            self.db.refresh(menu_item)
        return menu_items

    def list_by_vendor(self, vendor_id: int, limit: Optional[int] = None, offset: Optional[int] = None) -> List[MenuItem]:
        query = (
            self.db.query(MenuItem)
            .filter(MenuItem.vendor_id == vendor_id)
            .order_by(MenuItem.id)
        )
        if limit is not None:
            query = query.limit(limit)
        if offset is not None:
            query = query.offset(offset)
        return query.all()

    def count_by_vendor(self, vendor_id: int) -> int:
        return self.db.query(MenuItem).filter(MenuItem.vendor_id == vendor_id).count()

    def get_by_id(self, menu_item_id: int) -> Optional[MenuItem]:
        return self.db.query(MenuItem).filter(MenuItem.id == menu_item_id).first()

    def update(self, menu_item: MenuItem, changes: dict) -> MenuItem:
        for key, value in changes.items():
            setattr(menu_item, key, value)
        self.db.commit()
        self.db.refresh(menu_item)
        return menu_item

    def delete(self, menu_item: MenuItem):
        self.db.delete(menu_item)
        self.db.commit()
