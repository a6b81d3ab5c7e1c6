"""
Domain errors raised by services and repositories.

Each one carries the message shown to the caller. Routers map them onto
status codes: missing fields and bad ratings -> 400, unknown documents -> 404,
ownership mismatch -> 403.
"""


class MissingFieldsError(ValueError):
    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__("Missing required fields")


class InvalidRatingError(ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__("Rating must be a number")


class ReviewNotFoundError(LookupError):
    def __init__(self, review_id: str):
        self.review_id = review_id
        super().__init__("Review not found")


class UserNotFoundError(LookupError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("User not found")


class OwnershipError(PermissionError):
    """The requesting user does not own the review."""

    def __init__(self, review_id: str):
        self.review_id = review_id
        super().__init__("Unauthorized")
