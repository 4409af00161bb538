class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a viewer lacks permission for an action."""


class DataIssue(DomainError):
    """Data-shape problem that is collected, not raised, during aggregation."""


class MalformedDateError(DataIssue):
    """An item's date field is not an ISO-8601 date or instant."""

    def __init__(self, item_id, value):
        super().__init__(f"{item_id}: malformed date {value!r}")
        self.item_id = item_id
        self.value = value


class UnknownRoleError(DataIssue):
    """Viewer role is not parent, teacher or schoolOwner."""

    def __init__(self, viewer_id, role):
        super().__init__(f"viewer {viewer_id}: unknown role {role!r}")
        self.viewer_id = viewer_id
        self.role = role


class MissingAssociationError(DataIssue):
    """Parent without a child, or teacher without classes. Informational."""

    def __init__(self, viewer_id, detail: str):
        super().__init__(f"viewer {viewer_id}: {detail}")
        self.viewer_id = viewer_id
        self.detail = detail
