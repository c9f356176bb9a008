"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Comment body rejected before reaching the store (e.g. empty after trim)."""

    pass


class PermissionDenied(DomainError):
    """Raised when the acting tier is not entitled to write comments."""

    def __init__(self, tier: str):
        self.tier = tier
        super().__init__(f"Subscription tier '{tier}' cannot write comments")


class NotAuthorOfComment(DomainError):
    """Raised when a user edits or deletes a comment they did not write.

    Detected either client-side (identity mismatch) or when the store's
    user-scoped update/delete matches no row.
    """

    def __init__(self, comment_id: str, user_id: str):
        self.comment_id = comment_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is not the author of comment {comment_id}")


class StoreError(DomainError):
    """Raised when the comment store or profile lookup fails."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
