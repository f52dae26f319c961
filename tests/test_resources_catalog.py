"""Tests for the catalog resources."""

from unittest.mock import patch

import pytest
from fastmcp.exceptions import ResourceError

from local_library.database.seed import seed_sample_data
from local_library.resources import catalog_resources
from local_library.resources.catalog import (
    AUTHORS_URI,
    BOOKS_STATUS_URI,
    list_authors_handler,
    list_books_status_handler,
)


@pytest.fixture
def seeded_global_db(global_db):
    with global_db.session_scope() as session:
        seed_sample_data(session)
    return global_db


class TestResourceDefinitions:
    def test_resources_are_declared(self):
        uris = [resource["uri"] for resource in catalog_resources]

        assert uris == ["library://authors/list", "library://books/status"]
        for resource in catalog_resources:
            assert resource["mime_type"] == "application/json"
            assert callable(resource["handler"])


class TestAuthorsResource:
    @pytest.mark.asyncio
    async def test_returns_author_lines(self, seeded_global_db):
        result = await list_authors_handler()

        assert result["status_code"] == 200
        assert result["body"][0] == "Asimov, Isaac : 1920 - 1992"
        assert len(result["body"]) == 5

    @pytest.mark.asyncio
    async def test_empty_catalog(self, global_db):
        result = await list_authors_handler()

        assert result == {"status_code": 200, "body": "No authors found"}

    @pytest.mark.asyncio
    async def test_missing_tables_fall_back(self):
        from local_library.database.session import get_db_manager

        get_db_manager("sqlite:///:memory:")

        result = await list_authors_handler()

        assert result == {"status_code": 200, "body": "No authors found"}

    @pytest.mark.asyncio
    async def test_session_failure_raises_resource_error(self):
        with patch(
            "local_library.resources.catalog.session_scope",
            side_effect=RuntimeError("no database"),
        ):
            with pytest.raises(ResourceError, match="Failed to open the author catalog"):
                await list_authors_handler()


class TestBooksStatusResource:
    @pytest.mark.asyncio
    async def test_returns_available_books(self, seeded_global_db):
        result = await list_books_status_handler()

        assert result["status_code"] == 200
        assert sorted(result["body"]) == [
            "Apes and Angels : Available",
            "Foundation : Available",
            "The Name of the Wind (The Kingkiller Chronicle, #1) : Available",
        ]

    @pytest.mark.asyncio
    async def test_missing_tables_give_500(self):
        from local_library.database.session import get_db_manager

        get_db_manager("sqlite:///:memory:")

        result = await list_books_status_handler()

        assert result == {"status_code": 500, "body": "Status not found"}

    def test_uris(self):
        assert AUTHORS_URI == "library://authors/list"
        assert BOOKS_STATUS_URI == "library://books/status"
