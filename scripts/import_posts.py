#!/usr/bin/env python
"""
Import blog posts from a CSV file.

Expected columns: firstName, lastName, title, content, created (optional).

Usage:
    python scripts/import_posts.py data/data_blogposts.csv [--test] [--replace]
"""

import sys
from pathlib import Path

# Add parent directory to Python path to allow importing from root
sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
import asyncio
import csv

from pydantic import ValidationError

from config import settings
from logging_config import logger
from main import create_mongo_client
from models.posts import BlogPostCreate
from services.blogpost_service import COLLECTION, BlogPostService
from utils import parse_datetime


def read_posts(filename: str) -> list[BlogPostCreate]:
    with open(filename, encoding='utf-8') as f:
        records = list(csv.DictReader(f))

    posts = []
    for line_no, rec in enumerate(records, start=2):
        try:
            posts.append(BlogPostCreate(
                author={"firstName": rec.get("firstName"), "lastName": rec.get("lastName")},
                title=rec.get("title"),
                content=rec.get("content"),
                created=parse_datetime(rec.get("created")),
            ))
        except (ValidationError, ValueError) as e:
            logger.error(f"Invalid record at line {line_no}: {e}")
            raise SystemExit(1)
    return posts


async def import_posts(filename: str, use_test: bool, replace: bool) -> int:
    posts = read_posts(filename)
    client = create_mongo_client(settings.get_db_url(use_test))
    try:
        db = client[settings.get_db_name(use_test)]
        if replace:
            logger.info(f"Delete all records in {COLLECTION}")
            await db[COLLECTION].delete_many({})
        service = BlogPostService(db)
        for post in posts:
            await service.create(post)
    finally:
        client.close()
    return len(posts)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Import blog posts from CSV.')
    parser.add_argument('filename', help='CSV file to import')
    parser.add_argument('--test', action='store_true', help='Import into the test database.')
    parser.add_argument('--replace', action='store_true', help='Delete existing posts first.')
    args = parser.parse_args()

    imported = asyncio.run(import_posts(args.filename, args.test, args.replace))
    logger.info(f"SUCCESS: imported {imported} blog posts")
