"""Tests for pagination and rating helpers."""

import math

import pytest

from fitness_catalog.errors import InvalidRatingError, ValidationError
from fitness_catalog.rules import fold_rating, get_entity_config, paginate, validate_rating


class TestPaginate:
    """Tests for page window calculation."""

    def test_offset_and_last_page(self):
        window = paginate(page=3, limit=10, total=25)

        assert window.offset == 20
        assert window.meta() == {"total": 25, "page": 3, "last_page": 3}

    def test_empty_table_has_last_page_zero(self):
        assert paginate(1, 10, 0).last_page == 0

    def test_page_past_end_is_allowed(self):
        assert paginate(9, 5, 6).offset == 40

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (-1, 5)])
    def test_rejects_bad_window(self, page, limit):
        with pytest.raises(ValidationError):
            paginate(page, limit, 10)


class TestRating:
    """Tests for rating validation and folding."""

    @pytest.mark.parametrize("score", [0, 2.5, 5])
    def test_accepts_bounds(self, score):
        validate_rating(score, 0)

    @pytest.mark.parametrize("score", [-0.1, 5.01, math.nan])
    def test_rejects_out_of_range(self, score):
        with pytest.raises(InvalidRatingError, match="between 0 and 5"):
            validate_rating(score, 1)

    def test_rejects_negative_count(self):
        with pytest.raises(InvalidRatingError, match="cannot be negative"):
            validate_rating(4.0, -1)

    def test_fold_into_empty_aggregate(self):
        assert fold_rating(None, None, 4.0) == (4.0, 1)

    def test_fold_running_mean(self):
        score, count = fold_rating(4.0, 3, 2.0)
        assert count == 4
        assert score == pytest.approx(3.5)

    def test_fold_rejects_bad_rating(self):
        with pytest.raises(InvalidRatingError):
            fold_rating(3.0, 2, 6.0)


def test_unknown_entity_key():
    with pytest.raises(KeyError):
        get_entity_config("kettlebell")
