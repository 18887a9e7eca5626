from typing import Any, Dict, List, Optional
from pymongo.database import Database
from autoparts.repositories.interfaces import ICustomerRepository


class MongoCustomerRepository(ICustomerRepository):
    COLLECTION = "customers"

    def __init__(self, db: Database):
        self.collection = db[self.COLLECTION]

    def insert(self, customer: Dict[str, Any]) -> Any:
        return self.collection.insert_one(customer).inserted_id

    def find_by_customer_id(self, customer_id: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"customerId": customer_id})

    def update_one(self, customer_id: str, update: Dict[str, Any]) -> int:
        return self.collection.update_one({"customerId": customer_id}, update).modified_count

    def delete_one(self, customer_id: str) -> int:
        return self.collection.delete_one({"customerId": customer_id}).deleted_count

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return list(self.collection.aggregate(pipeline))
