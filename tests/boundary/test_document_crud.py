"""
Test suite for DocumentCRUD.

Multi-key lookups run against a file-backed SQLite database; the key
limit check is verified with a mocked session.

System role: Verification of document persistence layer
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from batchfetch.boundary.db.CRUD.document_crud import DocumentCRUD
from batchfetch.boundary.db.models.document_model import DocumentModel
from batchfetch.core.exceptions import BatchSizeExceededError, StoreError


@pytest.fixture
def document_crud() -> DocumentCRUD:
    """Provide DocumentCRUD instance for testing."""
    return DocumentCRUD()


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


class TestDocumentCRUDInit:
    """Test suite for DocumentCRUD initialization."""

    def test_init_should_set_model_and_default_limit(self) -> None:
        """Test DocumentCRUD targets DocumentModel with a 10-key limit."""
        crud = DocumentCRUD()

        assert crud.model is DocumentModel
        assert crud.max_keys_per_query == 10


class TestDocumentCRUDGetByKeysIn:
    """Test suite for DocumentCRUD.get_by_keys_in()."""

    @pytest.mark.asyncio
    async def test_get_by_keys_in_should_return_matching_rows(
        self, document_crud: DocumentCRUD, seeded_session_factory
    ) -> None:
        """Test only requested keys of the requested collection come back."""
        async with seeded_session_factory() as session:
            rows = await document_crud.get_by_keys_in(session, "products", ["id1", "id2", "missing"])

        assert sorted(row.doc_id for row in rows) == ["id1", "id2"]
        assert all(row.collection == "products" for row in rows)

    @pytest.mark.asyncio
    async def test_get_by_keys_in_should_scope_to_collection(
        self, document_crud: DocumentCRUD, seeded_session_factory
    ) -> None:
        """Test keys from another collection do not match."""
        async with seeded_session_factory() as session:
            rows = await document_crud.get_by_keys_in(session, "users", ["id1", "u1"])

        assert [row.doc_id for row in rows] == ["u1"]

    @pytest.mark.asyncio
    async def test_get_by_keys_in_should_skip_query_for_no_keys(
        self, document_crud: DocumentCRUD, mock_session: AsyncSession
    ) -> None:
        """Test an empty key list returns [] without executing SQL."""
        rows = await document_crud.get_by_keys_in(mock_session, "products", [])

        assert rows == []
        mock_session.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_by_keys_in_should_reject_too_many_keys(
        self, document_crud: DocumentCRUD, mock_session: AsyncSession
    ) -> None:
        """Test more than max_keys_per_query keys raise before querying."""
        keys = [f"id{i}" for i in range(11)]

        with pytest.raises(BatchSizeExceededError) as exc_info:
            await document_crud.get_by_keys_in(mock_session, "products", keys)

        assert isinstance(exc_info.value, StoreError)
        assert exc_info.value.details == {"collection": "products", "requested": 11, "limit": 10}
        mock_session.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_by_keys_in_should_honour_limit_override(
        self, document_crud: DocumentCRUD, mock_session: AsyncSession
    ) -> None:
        """Test max_keys overrides the instance limit."""
        with pytest.raises(BatchSizeExceededError):
            await document_crud.get_by_keys_in(mock_session, "products", ["a", "b", "c"], max_keys=2)

