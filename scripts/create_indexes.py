"""
MongoDB Index Creation Script

Run this to create the indexes used by the blog posts API.
Should be run once after deployment and whenever index strategy changes.

Usage:
    python scripts/create_indexes.py [--test]
"""

import sys
from pathlib import Path

# Add parent directory to Python path to allow importing from root
sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
import asyncio

from pymongo.errors import OperationFailure

from config import settings
from logging_config import logger
from main import create_mongo_client
from services.blogpost_service import COLLECTION


async def create_index_safe(collection, keys, **kwargs):
    """Helper to create index and skip if already exists"""
    index_name = kwargs.get('name', 'unnamed')
    try:
        await collection.create_index(keys, **kwargs)
        logger.info(f"  ✓ Created index: {index_name}")
    except OperationFailure as e:
        if "already exists" in str(e) or "IndexOptionsConflict" in str(e):
            logger.info(f"  ↷ Index already exists: {index_name}")
        else:
            logger.error(f"  ✗ Failed to create index {index_name}: {str(e)}")
            raise


async def create_indexes(db):
    """Create all indexes on the blogposts collection"""
    logger.info(f"Starting index creation for database: {db.name}...")

    logger.info(f"Creating {COLLECTION} collection indexes...")
    await create_index_safe(db[COLLECTION],
        [("created", -1), ("_id", 1)],
        name="created_desc_idx"
    )
    await create_index_safe(db[COLLECTION], [
        ("author.lastName", 1),
        ("author.firstName", 1)
    ], name="author_name_idx")

    logger.info("✅ Index creation complete")


async def main(use_test: bool):
    client = create_mongo_client(settings.get_db_url(use_test))
    try:
        await create_indexes(client[settings.get_db_name(use_test)])
    finally:
        client.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Create MongoDB indexes.')
    parser.add_argument('--test',
                        action='store_true',
                        help='Create indexes in the test database.')
    args = parser.parse_args()
    asyncio.run(main(args.test))
