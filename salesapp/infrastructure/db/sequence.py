"""
Integer id sequences stored in the counters collection.
"""
from pymongo import ReturnDocument

from salesapp.core.config import get_settings
from salesapp.infrastructure.db.mongo_connection import MongoClientManager


class MongoSequence:
    """Atomic auto-increment counter, one document per sequence name."""

    def __init__(self, client: MongoClientManager, name: str):
        self._collection = client.get_collection(get_settings().counters_collection)
        self._name = name

    def next_value(self) -> int:
        doc = self._collection.find_one_and_update(
            {"_id": self._name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(doc["seq"])
