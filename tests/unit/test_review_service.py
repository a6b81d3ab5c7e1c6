"""Unit tests for review validation, ordering and ownership rules."""

import pytest

from api.errors import InvalidRatingError, MissingFieldsError, OwnershipError, ReviewNotFoundError
from api.schemas.reviews import ReviewCreateRequest, ReviewUpdateRequest
from api.services import review_service


def new_review(**overrides):
    fields = {"movieId": "42", "userId": "u1", "userName": "Ann", "rating": 5}
    fields.update(overrides)
    return ReviewCreateRequest(**fields)


class TestCoerceRating:

    @pytest.mark.parametrize("value, expected", [(5, 5.0), (7.5, 7.5), ("8", 8.0), (" 6.5 ", 6.5), (0, 0.0)])
    def test_numeric_values(self, value, expected):
        assert review_service.coerce_rating(value) == expected

    @pytest.mark.parametrize("value", ["great", True, [5], "nan", "inf", {"value": 1}])
    def test_rejects_non_numeric(self, value):
        with pytest.raises(InvalidRatingError, match="Rating must be a number"):
            review_service.coerce_rating(value)


class TestCreateReview:

    @pytest.mark.parametrize("field", ["movieId", "userId", "rating"])
    def test_missing_required_field_stores_nothing(self, review_repo, field):
        with pytest.raises(MissingFieldsError) as exc_info:
            review_service.create_review(review_repo, new_review(**{field: None}))

        assert exc_info.value.fields == [field]
        assert str(exc_info.value) == "Missing required fields"
        assert review_repo.find_by_field("movieId", "42") == []

    def test_empty_strings_count_as_missing(self, review_repo):
        with pytest.raises(MissingFieldsError) as exc_info:
            review_service.create_review(review_repo, new_review(movieId="", rating=" "))

        assert exc_info.value.fields == ["movieId", "rating"]

    def test_non_numeric_rating_is_rejected(self, review_repo):
        with pytest.raises(InvalidRatingError):
            review_service.create_review(review_repo, new_review(rating="ten"))
        assert review_repo.find_by_field("movieId", "42") == []

    def test_creates_with_defaults_and_timestamps(self, review_repo):
        review = review_service.create_review(review_repo, new_review(rating="9"))

        assert review.id
        assert review.rating == 9.0
        assert review.comment == ""
        assert review.created_at is not None
        assert review.created_at == review.updated_at
        assert review_repo.get(review.id)["rating"] == 9.0

    def test_numeric_movie_id_is_stored_as_string(self, review_repo):
        review = review_service.create_review(review_repo, new_review(movieId=42))

        assert review.movie_id == "42"


class TestListReviews:

    def test_most_recent_first(self, review_repo):
        ids = [review_service.create_review(review_repo, new_review(comment=str(i))).id for i in range(3)]

        listed = review_service.list_reviews_for_movie(review_repo, "42")

        assert [r.id for r in listed] == list(reversed(ids))

    def test_missing_timestamp_sorts_last(self, review_repo):
        first = review_service.create_review(review_repo, new_review())
        review_repo._docs["legacy"] = {"movieId": "42", "userId": "u9", "rating": 3.0, "comment": ""}
        second = review_service.create_review(review_repo, new_review())

        listed = review_service.list_reviews_for_movie(review_repo, "42")

        assert [r.id for r in listed] == [second.id, first.id, "legacy"]
        assert listed[-1].created_at is None

    def test_filters_by_movie_and_user(self, review_repo):
        review_service.create_review(review_repo, new_review(movieId="1", userId="a"))
        review_service.create_review(review_repo, new_review(movieId="2", userId="a"))
        review_service.create_review(review_repo, new_review(movieId="1", userId="b"))

        assert {r.user_id for r in review_service.list_reviews_for_movie(review_repo, "1")} == {"a", "b"}
        assert {r.movie_id for r in review_service.list_reviews_by_user(review_repo, "a")} == {"1", "2"}
        assert review_service.list_reviews_by_user(review_repo, "nobody") == []


class TestUpdateReview:

    def test_owner_can_update(self, review_repo):
        created = review_service.create_review(review_repo, new_review(comment="ok"))

        updated = review_service.update_review(
            review_repo, created.id, ReviewUpdateRequest(userId="u1", rating="3", comment="meh")
        )

        assert updated.rating == 3.0
        assert updated.comment == "meh"
        assert updated.movie_id == "42"
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at

    def test_comment_defaults_to_empty(self, review_repo):
        created = review_service.create_review(review_repo, new_review(comment="ok"))

        updated = review_service.update_review(review_repo, created.id, ReviewUpdateRequest(userId="u1", rating=4))

        assert updated.comment == ""

    def test_other_user_is_forbidden(self, review_repo):
        created = review_service.create_review(review_repo, new_review(comment="mine"))

        with pytest.raises(OwnershipError, match="Unauthorized"):
            review_service.update_review(review_repo, created.id, ReviewUpdateRequest(userId="u2", rating=1))

        stored = review_repo.get(created.id)
        assert stored["rating"] == 5.0
        assert stored["comment"] == "mine"

    def test_unknown_review(self, review_repo):
        with pytest.raises(ReviewNotFoundError, match="Review not found"):
            review_service.update_review(review_repo, "missing", ReviewUpdateRequest(userId="u1", rating=1))

    def test_rating_required(self, review_repo):
        created = review_service.create_review(review_repo, new_review())

        with pytest.raises(MissingFieldsError):
            review_service.update_review(review_repo, created.id, ReviewUpdateRequest(userId="u1"))


class TestDeleteReview:

    def test_owner_can_delete(self, review_repo):
        created = review_service.create_review(review_repo, new_review())

        review_service.delete_review(review_repo, created.id, "u1")

        assert review_repo.get(created.id) is None

    def test_other_user_is_forbidden(self, review_repo):
        created = review_service.create_review(review_repo, new_review())

        with pytest.raises(OwnershipError):
            review_service.delete_review(review_repo, created.id, "u2")
        with pytest.raises(OwnershipError):
            review_service.delete_review(review_repo, created.id, None)

        assert review_repo.get(created.id) is not None

    def test_unknown_review(self, review_repo):
        with pytest.raises(ReviewNotFoundError):
            review_service.delete_review(review_repo, "missing", "u1")
