# restopos/services/pos/catalog.py
import logging
from typing import Iterable, List, Optional

from restopos.auth.policy import Resource, require_mutate
from restopos.core.exceptions import NotFoundError
from restopos.schemas.menu_item import Category, MenuItem, MenuItemCreate, MenuItemUpdate
from restopos.schemas.user import Actor
from restopos.services.pos.common import IdSequence, require_confirmation

log = logging.getLogger(__name__)


class Catalog:
    """Menu items offered for sale, in display order."""

    def __init__(self, items: Iterable[MenuItem] = ()):
        self._items: List[MenuItem] = list(items)
        self._ids = IdSequence(self._items)

    def __len__(self):
        return len(self._items)

    def list(self, category: Optional[Category] = None, search: Optional[str] = None) -> List[MenuItem]:
        term = (search or "").strip().lower()
        return [
            item for item in self._items
            if (category is None or item.category == category)
            and term in item.name.lower()
        ]

    def available(self, category: Optional[Category] = None, search: Optional[str] = None) -> List[MenuItem]:
        return [item for item in self.list(category, search) if item.is_available]

    def get(self, item_id: int) -> Optional[MenuItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def add(self, actor: Actor, data: MenuItemCreate) -> MenuItem:
        require_mutate(actor, Resource.catalog)
        item = MenuItem(id=self._ids.next_id(), **data.model_dump())
        self._items.append(item)
        log.info("menu item added: id=%s name=%s by=%s", item.id, item.name, actor.username)
        return item

    def update(self, actor: Actor, item_id: int, changes: MenuItemUpdate) -> MenuItem:
        require_mutate(actor, Resource.catalog)
        current = self.get(item_id)
        if current is None:
            raise NotFoundError("Menu item", item_id)

        # Replace rather than mutate so carts holding the old snapshot keep it
        updated = MenuItem(**{**current.model_dump(), **changes.model_dump(exclude_unset=True, exclude_none=True)})
        self._items[self._items.index(current)] = updated
        log.info("menu item updated: id=%s by=%s", item_id, actor.username)
        return updated

    def delete(self, actor: Actor, item_id: int, confirm: bool = False) -> bool:
        require_mutate(actor, Resource.catalog)
        require_confirmation(confirm, f"delete menu item {item_id}")
        item = self.get(item_id)
        if item is None:
            return False
        self._items.remove(item)
        log.info("menu item deleted: id=%s by=%s", item_id, actor.username)
        return True
