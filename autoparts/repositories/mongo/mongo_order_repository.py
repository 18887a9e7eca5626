from typing import Any, Dict, List, Optional
from pymongo.database import Database
from autoparts.repositories.interfaces import IOrderRepository


class MongoOrderRepository(IOrderRepository):
    COLLECTION = "orders"

    def __init__(self, db: Database):
        self.collection = db[self.COLLECTION]

    def insert(self, order: Dict[str, Any]) -> Any:
        return self.collection.insert_one(order).inserted_id

    def find_by_order_id(self, order_id: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"orderId": order_id})

    def update_one(self, order_id: str, update: Dict[str, Any]) -> int:
        return self.collection.update_one({"orderId": order_id}, update).modified_count

    def delete_one(self, order_id: str) -> int:
        return self.collection.delete_one({"orderId": order_id}).deleted_count

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return list(self.collection.aggregate(pipeline))
