"""
BlogPost Service - Resource store for blog post documents

All reads and writes against the blogposts collection go through this class.
Driver failures are translated into the API exception hierarchy.
"""
from functools import wraps

from bson import ObjectId
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import ConnectionFailure, PyMongoError

from exceptions import (
    DatabaseOperationException,
    ResourceNotFoundException,
    StoreUnavailableException,
)
from logging_config import logger
from models.posts import BlogPostCreate, BlogPostDB, BlogPostUpdate
from services.performance_monitor import monitor_query
from utils import now_to_seconds

COLLECTION = "blogposts"


def id_filter(post_id: str) -> dict:
    """Match an id stored either as a hex string or as an ObjectId"""
    if ObjectId.is_valid(post_id):
        return {"_id": {"$in": [post_id, ObjectId(post_id)]}}
    return {"_id": post_id}


def translate_store_errors(operation: str):
    """Map pymongo errors raised by a store operation to API exceptions"""

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except ConnectionFailure as e:
                raise StoreUnavailableException(operation, {"error": str(e)}) from e
            except PyMongoError as e:
                raise DatabaseOperationException(
                    operation, collection=COLLECTION, details={"error": str(e)}
                ) from e
            except ValidationError as e:
                raise DatabaseOperationException(
                    operation,
                    message="Stored blog post does not match the expected document shape",
                    collection=COLLECTION,
                    details={"error": str(e)},
                ) from e

        return wrapper

    return decorator


class BlogPostService:
    """Persistence for blog posts on top of a Motor database handle"""

    def __init__(self, mongodb):
        self.db = mongodb
        self.collection = mongodb[COLLECTION]

    @monitor_query("blogposts.list_all")
    @translate_store_errors("list_all")
    async def list_all(self) -> list[BlogPostDB]:
        """
        Return every stored blog post.

        Sorted newest first, ties broken by id, so one read is stable.
        """
        cursor = self.collection.find({}).sort([("created", -1), ("_id", 1)])
        posts = await cursor.to_list(length=None)
        logger.debug(f"Fetched {len(posts)} blog posts")
        return [BlogPostDB(**post) for post in posts]

    @monitor_query("blogposts.count")
    @translate_store_errors("count")
    async def count(self) -> int:
        return await self.collection.count_documents({})

    @monitor_query("blogposts.find_by_id")
    @translate_store_errors("find_by_id")
    async def find_by_id(self, post_id: str) -> BlogPostDB:
        """
        Look up a single blog post.

        Raises:
            ResourceNotFoundException: If no post has this id
        """
        post = await self.collection.find_one(id_filter(post_id))
        if not post:
            raise ResourceNotFoundException(resource_type="BlogPost", resource_id=post_id)
        return BlogPostDB(**post)

    @monitor_query("blogposts.create")
    @translate_store_errors("create")
    async def create(self, fields: BlogPostCreate) -> BlogPostDB:
        """
        Persist a new blog post and return it as stored.

        The store assigns the id; created defaults to now.
        """
        post_data = {
            "_id": str(ObjectId()),
            "author": fields.author.model_dump(),
            "title": fields.title,
            "content": fields.content,
            "created": fields.created or now_to_seconds(),
        }
        result = await self.collection.insert_one(post_data)
        created_post = await self.collection.find_one({"_id": result.inserted_id})
        if not created_post:
            raise DatabaseOperationException(
                "insert",
                message="Failed to read back created blog post",
                collection=COLLECTION,
                details={"post_id": post_data["_id"]},
            )
        logger.info(f"Created blog post {post_data['_id']}: {fields.title!r}")
        return BlogPostDB(**created_post)

    @monitor_query("blogposts.update_by_id")
    @translate_store_errors("update_by_id")
    async def update_by_id(self, post_id: str, patch: BlogPostUpdate) -> BlogPostDB:
        """
        Apply the fields present in the patch and return the updated post.

        Raises:
            ResourceNotFoundException: If no post has this id
        """
        updates = patch.updates()
        if not updates:
            logger.debug(f"Empty patch for blog post {post_id}, nothing to update")
            return await self.find_by_id(post_id)

        updated_post = await self.collection.find_one_and_update(
            id_filter(post_id),
            {"$set": updates},
            return_document=ReturnDocument.AFTER,
        )
        if not updated_post:
            raise ResourceNotFoundException(resource_type="BlogPost", resource_id=post_id)
        logger.info(f"Updated blog post {post_id}: {sorted(updates)}")
        return BlogPostDB(**updated_post)

    @monitor_query("blogposts.delete_by_id")
    @translate_store_errors("delete_by_id")
    async def delete_by_id(self, post_id: str) -> None:
        """
        Raises:
            ResourceNotFoundException: If no post has this id
        """
        result = await self.collection.delete_one(id_filter(post_id))
        if result.deleted_count == 0:
            raise ResourceNotFoundException(resource_type="BlogPost", resource_id=post_id)
        logger.info(f"Deleted blog post {post_id}")
