from typing import List
from pymongo.database import Database
from autoparts.database import models
from autoparts.repositories.interfaces import IRoleRepository


class MongoRoleRepository(IRoleRepository):
    COLLECTION = "roles"

    def __init__(self, db: Database):
        self.collection = db[self.COLLECTION]

    def replace_all(self, roles: List[models.Role]) -> int:
        self.collection.delete_many({})
        if not roles:
            return 0
        result = self.collection.insert_many([role.to_document() for role in roles])
        return len(result.inserted_ids)

    def list_all(self) -> List[models.Role]:
        return [models.Role.from_document(doc) for doc in self.collection.find().sort("name", 1)]
