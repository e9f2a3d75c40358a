"""Tests for shared/repository.py."""

import httpx
import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from shared.exceptions import UpstreamFailure
from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_execute_returns_response(self):
        """_execute should run the query once and return its response."""
        query = MagicMock()
        query.execute.return_value.data = [{"id": "123"}]

        result = BaseRepository(MagicMock())._execute(query, "test query")

        assert result.data == [{"id": "123"}]
        query.execute.assert_called_once()

    def test_execute_wraps_api_error(self):
        """PostgREST errors should surface as UpstreamFailure."""
        query = MagicMock()
        query.execute.side_effect = APIError({"message": "relation does not exist", "code": "42P01"})

        with pytest.raises(UpstreamFailure) as exc_info:
            BaseRepository(MagicMock())._execute(query, "broken query")

        assert exc_info.value.details["operation"] == "broken query"
        query.execute.assert_called_once()

    def test_execute_wraps_transport_error(self):
        """Network failures should surface as UpstreamFailure without retrying."""
        query = MagicMock()
        query.execute.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(UpstreamFailure):
            BaseRepository(MagicMock())._execute(query, "unreachable")

        assert query.execute.call_count == 1
