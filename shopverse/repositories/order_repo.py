# shopverse/repositories/order_repo.py
from shopverse.models.order import Order
from shopverse.repositories.record_store import ORDERS, RecordStore


class OrderRepository:
    """Data access layer for the `orders` collection."""

    def list_all(self, store: RecordStore) -> list[Order]:
        return [Order.model_validate(raw) for raw in store.load(ORDERS)]

    def list_for_user(self, store: RecordStore, user_id: str) -> list[Order]:
        return [o for o in self.list_all(store) if o.user_id == user_id]

    def save_all(self, store: RecordStore, orders: list[Order]) -> None:
        store.save(ORDERS, [o.model_dump(mode="json") for o in orders])

    def append(self, store: RecordStore, order: Order) -> Order:
        orders = self.list_all(store)
        orders.append(order)
        self.save_all(store, orders)
        return order

    def count(self, store: RecordStore) -> int:
        return len(store.load(ORDERS))
