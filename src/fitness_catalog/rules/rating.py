"""Rating validation and aggregation."""

from ..errors import InvalidRatingError

MIN_SCORE = 0.0
MAX_SCORE = 5.0


def validate_score(score: float) -> None:
    # The negated form also rejects NaN
    if not (MIN_SCORE <= score <= MAX_SCORE):
        raise InvalidRatingError(
            f"Rating must be between {MIN_SCORE:g} and {MAX_SCORE:g}",
            details={"score": score},
        )


def validate_rating(score: float, total_ratings: int) -> None:
    """Validate a caller-supplied rating aggregate."""
    validate_score(score)
    if total_ratings < 0:
        raise InvalidRatingError(
            "Total ratings cannot be negative",
            details={"total_ratings": total_ratings},
        )


def fold_rating(score: float | None, total_ratings: int | None, rating: float) -> tuple[float, int]:
    """Fold one new rating into a running mean.

    A missing score or count is treated as no ratings yet.

    Returns:
        (new_score, new_total_ratings)
    """
    validate_score(rating)
    count = total_ratings or 0
    current = score or 0.0
    new_count = count + 1
    return (current * count + rating) / new_count, new_count
