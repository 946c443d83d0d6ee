"""Unit tests for the maintenance scripts"""
from datetime import datetime

import pytest
from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import OperationFailure

from scripts.create_indexes import create_indexes
from scripts.import_posts import read_posts


class TestReadPosts:

    def test_reads_valid_rows(self, tmp_path):
        csv_file = tmp_path / "posts.csv"
        csv_file.write_text(
            "firstName,lastName,title,content,created\n"
            "Jane,Doe,Hello,World,2024-01-15 18:00:00\n"
            "John,Roe,Second,Post,\n",
            encoding="utf-8",
        )

        posts = read_posts(str(csv_file))

        assert len(posts) == 2
        assert posts[0].author.fullName == "Jane Doe"
        assert posts[0].created == datetime(2024, 1, 15, 18, 0)
        assert posts[1].created is None

    def test_invalid_row_aborts(self, tmp_path):
        csv_file = tmp_path / "posts.csv"
        csv_file.write_text(
            "firstName,lastName,title,content,created\n"
            "Jane,Doe,,World,\n",
            encoding="utf-8",
        )

        with pytest.raises(SystemExit):
            read_posts(str(csv_file))


class TestCreateIndexes:

    @pytest.mark.asyncio
    async def test_creates_blogpost_indexes(self):
        collection = MagicMock()
        collection.create_index = AsyncMock()
        db = MagicMock()
        db.name = "blog_app_test"
        db.__getitem__ = MagicMock(return_value=collection)

        await create_indexes(db)

        names = [call.kwargs["name"] for call in collection.create_index.call_args_list]
        assert names == ["created_desc_idx", "author_name_idx"]
        db.__getitem__.assert_called_with("blogposts")

    @pytest.mark.asyncio
    async def test_existing_index_is_skipped(self):
        collection = MagicMock()
        collection.create_index = AsyncMock(side_effect=OperationFailure("index already exists"))
        db = MagicMock()
        db.name = "blog_app_test"
        db.__getitem__ = MagicMock(return_value=collection)

        await create_indexes(db)

        assert collection.create_index.call_count == 2

    @pytest.mark.asyncio
    async def test_other_failures_propagate(self):
        collection = MagicMock()
        collection.create_index = AsyncMock(side_effect=OperationFailure("not authorized"))
        db = MagicMock()
        db.name = "blog_app_test"
        db.__getitem__ = MagicMock(return_value=collection)

        with pytest.raises(OperationFailure):
            await create_indexes(db)
