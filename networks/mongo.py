import pymongo

from bson import ObjectId
from tclogger import logger, logstr, brk

from configs.envs import MONGO_ENVS
from recalls.base import VideoRepository
from recalls.conditions import StagedConditionsBuilder, substring_clause


class MongoOperator:
    def __init__(self, mongo_envs: dict = MONGO_ENVS, verbose: bool = True):
        self.host = mongo_envs["host"]
        self.port = mongo_envs["port"]
        self.dbname = mongo_envs["dbname"]
        self.endpoint = f"mongodb://{self.host}:{self.port}/"
        self.verbose = verbose
        self.connect()

    def connect(self):
        if self.verbose:
            logger.note(f"> Connecting to: {logstr.mesg(self.endpoint)} ...")
        # MongoClient connects lazily, and is safe to share across threads
        self.client = pymongo.MongoClient(self.endpoint)
        self.db = self.client[self.dbname]
        if self.verbose:
            logger.success(f"+ Connected to {brk(self.dbname)}")


def stringify_id(doc: dict) -> dict:
    if isinstance(doc.get("_id"), ObjectId):
        doc["_id"] = str(doc["_id"])
    return doc


class MongoVideoRepository(VideoRepository):
    """Video repository backed by a Mongo collection.

    Matching uses escaped, case-insensitive `$regex` clauses, so user input
    is always treated as a literal substring.
    """

    def __init__(
        self,
        collection=None,
        mongo_envs: dict = MONGO_ENVS,
        verbose: bool = False,
    ):
        if collection is None:
            mongo = MongoOperator(mongo_envs, verbose=verbose)
            collection = mongo.db[mongo_envs.get("collection", "videos")]
        self.collection = collection
        self.verbose = verbose
        self.conditions_builder = StagedConditionsBuilder()

    def build_filter(
        self,
        fields: list[str],
        pattern: str,
        fuzzy_terms: list[str] = [],
        fuzzy_fields: list[str] = [],
    ) -> dict:
        clauses = [substring_clause(field, pattern) for field in fields]
        if fuzzy_terms and fuzzy_fields:
            fuzzy = self.conditions_builder.fuzzy(fuzzy_terms, fields=fuzzy_fields)
            clauses.extend(fuzzy["$or"])
        return {"$or": clauses}

    def find_by_text_match(
        self,
        fields: list[str],
        pattern: str,
        limit: int,
        fuzzy_terms: list[str] = [],
        fuzzy_fields: list[str] = [],
    ) -> list[dict]:
        filter = self.build_filter(fields, pattern, fuzzy_terms, fuzzy_fields)
        if self.verbose:
            logger.note(f"> Mongo find:", end=" ")
            logger.mesg(f"[{pattern}] (limit={limit})")
        cursor = self.collection.find(filter).sort(self.sort).limit(limit)
        return [stringify_id(doc) for doc in cursor]


if __name__ == "__main__":
    repository = MongoVideoRepository(verbose=True)
    videos = repository.find_by_text_match(["title", "description"], "react", 5)
    for video in videos:
        logger.mesg(f"  * {video.get('_id')}: {video.get('title')}")

    # python -m networks.mongo
