from typing import Any, Dict, List, Optional
from pymongo.database import Database
from autoparts.repositories.interfaces import IPartRepository


class MongoPartRepository(IPartRepository):
    COLLECTION = "parts"

    def __init__(self, db: Database):
        self.collection = db[self.COLLECTION]

    def insert(self, part: Dict[str, Any]) -> Any:
        return self.collection.insert_one(part).inserted_id

    def find_by_part_number(self, part_number: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"partNumber": part_number})

    def find(self, query: Dict[str, Any], sort: Optional[List[tuple]] = None, limit: int = 0) -> List[Dict[str, Any]]:
        cursor = self.collection.find(query)
        if sort:
            cursor = cursor.sort(sort)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def count(self, query: Dict[str, Any]) -> int:
        return self.collection.count_documents(query)

    def update_one(self, part_number: str, update: Dict[str, Any]) -> int:
        return self.collection.update_one({"partNumber": part_number}, update).modified_count

    def update_many(self, query: Dict[str, Any], update: Dict[str, Any]) -> int:
        return self.collection.update_many(query, update).modified_count

    def delete_one(self, part_number: str) -> int:
        return self.collection.delete_one({"partNumber": part_number}).deleted_count

    def delete_many(self, query: Dict[str, Any]) -> int:
        return self.collection.delete_many(query).deleted_count

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return list(self.collection.aggregate(pipeline))
