"""Tests for the SQLAlchemy record store."""

from unittest.mock import Mock

import pytest

from local_library.database import Author, BookInstance, QueryError, SqlRecordStore, build_criteria
from local_library.models.book_instance import BookInstanceStatus
from local_library.pages.authors import get_author_list, show_all_authors
from local_library.pages.books_status import show_all_books_status
from local_library.pages.response import CapturedResponse

pytestmark = pytest.mark.integration


class TestFindAll:
    @pytest.mark.asyncio
    async def test_order_by_family_name_ascending(self, seeded_session):
        store = SqlRecordStore(seeded_session, Author)

        authors = await store.find_all().order_by([("family_name", "ascending")])

        assert [a.family_name for a in authors] == [
            "Asimov",
            "Billings",
            "Bova",
            "Jones",
            "Rothfuss",
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("direction", ["descending", "desc", -1, "DESCENDING"])
    async def test_order_by_descending(self, seeded_session, direction):
        store = SqlRecordStore(seeded_session, Author)

        authors = await store.find_all().order_by([("family_name", direction)])

        assert authors[0].family_name == "Rothfuss"
        assert authors[-1].family_name == "Asimov"

    @pytest.mark.asyncio
    async def test_implicit_equality_filter(self, seeded_session):
        store = SqlRecordStore(seeded_session, Author)

        authors = await store.find_all({"first_name": "Ben"}).order_by([])

        assert [a.family_name for a in authors] == ["Bova"]

    @pytest.mark.asyncio
    async def test_in_and_ne_operators(self, seeded_session):
        store = SqlRecordStore(seeded_session, Author)

        authors = await store.find_all(
            {"family_name": {"$in": ["Bova", "Jones", "Asimov"], "$ne": "Jones"}}
        ).order_by([("family_name", "asc")])

        assert [a.family_name for a in authors] == ["Asimov", "Bova"]

    @pytest.mark.asyncio
    async def test_status_filter_with_relation(self, seeded_session):
        store = SqlRecordStore(seeded_session, BookInstance)

        instances = await store.find_all({"status": {"$eq": "Available"}}).with_relation("book")

        assert {i.status for i in instances} == {BookInstanceStatus.AVAILABLE}
        assert sorted(i.book.title for i in instances) == [
            "Apes and Angels",
            "Foundation",
            "The Name of the Wind (The Kingkiller Chronicle, #1)",
        ]

    def test_unknown_field_is_rejected(self):
        with pytest.raises(QueryError, match="no field named 'nickname'"):
            build_criteria(Author, {"nickname": "Ben"})

    def test_unknown_operator_is_rejected(self):
        with pytest.raises(QueryError, match="Unsupported filter operator"):
            build_criteria(Author, {"family_name": {"$regex": "^B"}})

    @pytest.mark.asyncio
    async def test_invalid_direction_is_rejected(self, db_session):
        store = SqlRecordStore(db_session, Author)

        with pytest.raises(QueryError, match="Invalid sort direction"):
            await store.find_all().order_by([("family_name", "sideways")])

    @pytest.mark.asyncio
    async def test_unknown_relation_is_rejected(self, db_session):
        store = SqlRecordStore(db_session, BookInstance)

        with pytest.raises(QueryError, match="no relation named 'author'"):
            await store.find_all().with_relation("author")

    @pytest.mark.asyncio
    async def test_database_failure_becomes_query_error(self):
        session = Mock()
        session.execute.side_effect = RuntimeError("disk I/O error")
        store = SqlRecordStore(session, Author)

        with pytest.raises(QueryError, match="Failed to query Author"):
            await store.find_all().order_by([("family_name", "ascending")])


class TestPagesOverDatabase:
    @pytest.mark.asyncio
    async def test_author_list(self, seeded_session):
        result = await get_author_list(SqlRecordStore(seeded_session, Author))

        assert result == [
            "Asimov, Isaac : 1920 - 1992",
            "Billings, Bob :  - ",
            "Bova, Ben : 1932 - ",
            "Jones, Jim : 1971 - ",
            "Rothfuss, Patrick : 1973 - ",
        ]

    @pytest.mark.asyncio
    async def test_empty_author_table(self, db_session):
        response = CapturedResponse()

        await show_all_authors(response, SqlRecordStore(db_session, Author))

        assert response.sent is True
        assert response.to_dict() == {"status_code": 200, "body": "No authors found"}

    @pytest.mark.asyncio
    async def test_books_status(self, seeded_session):
        response = CapturedResponse()

        await show_all_books_status(response, SqlRecordStore(seeded_session, BookInstance))

        assert response.status_code == 200
        assert sorted(response.body) == [
            "Apes and Angels : Available",
            "Foundation : Available",
            "The Name of the Wind (The Kingkiller Chronicle, #1) : Available",
        ]
