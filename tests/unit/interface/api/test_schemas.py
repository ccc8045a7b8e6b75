"""Unit tests for API request schemas."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from remark.domain.value import SortField, SortOrder
from remark.interface.api.schemas import (
    CreateCommentAPIRequest,
    PaginationQuery,
    UpdateCommentAPIRequest,
)


class TestPaginationQuery:
    """Tests for listing query parameters."""

    def test_defaults(self):
        """Page 1, ten items, newest first."""
        options = PaginationQuery().to_options()

        assert options.page == 1
        assert options.limit == 10
        assert options.sort_by == SortField.CREATED_AT
        assert options.sort_order == SortOrder.DESC

    def test_values_are_passed_through(self):
        """Explicit values reach the domain options."""
        query = PaginationQuery(
            page=3, limit=25, sort_by="updated_at", sort_order="asc"
        )

        options = query.to_options()

        assert (options.page, options.limit) == (3, 25)
        assert options.sort_by == SortField.UPDATED_AT
        assert options.sort_order == SortOrder.ASC

    @pytest.mark.parametrize(
        "params",
        [{"page": 0}, {"limit": 0}, {"limit": 101}, {"sort_by": "title"}],
    )
    def test_out_of_range_values_are_rejected(self, params):
        """Page starts at 1 and limit stays within 1..100."""
        with pytest.raises(ValidationError):
            PaginationQuery(**params)


class TestCommentRequests:
    """Tests for comment request bodies."""

    def test_content_is_trimmed(self):
        """Surrounding whitespace is stripped."""
        request = CreateCommentAPIRequest(content="  Hi \n", author_id=uuid4())

        assert request.content == "Hi"
        assert request.parent_id is None

    def test_blank_content_is_rejected(self):
        """Whitespace-only content is empty after trimming."""
        with pytest.raises(ValidationError):
            UpdateCommentAPIRequest(content=" \t ")

    def test_content_length_limit(self):
        """5000 characters pass, 5001 do not."""
        UpdateCommentAPIRequest(content="x" * 5000)

        with pytest.raises(ValidationError):
            UpdateCommentAPIRequest(content="x" * 5001)
