from typing import Any, Dict, List, Optional
from pymongo.database import Database
from autoparts.repositories.interfaces import ISalesOrderRepository


class MongoSalesOrderRepository(ISalesOrderRepository):
    COLLECTION = "salesOrdersWithAccess"

    def __init__(self, db: Database):
        self.collection = db[self.COLLECTION]

    def replace_all(self, orders: List[Dict[str, Any]]) -> int:
        self.collection.delete_many({})
        if not orders:
            return 0
        # insert_many는 전달된 dict에 _id를 채워 넣으므로 복사본을 넘깁니다.
        result = self.collection.insert_many([dict(order) for order in orders])
        return len(result.inserted_ids)

    def list_visible_to(self, created_by: Optional[str] = None) -> List[Dict[str, Any]]:
        query = {} if created_by is None else {"createdBy": created_by}
        return list(self.collection.find(query).sort("orderId", 1))
