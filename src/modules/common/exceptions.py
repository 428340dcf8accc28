"""Domain exception classes for repository and adapter errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    pass


class ResourceNotFoundError(DomainError):
    """Raised when a requested resource cannot be found."""

    pass


class DocumentNotFoundError(ResourceNotFoundError):
    """Raised when a document id does not resolve to a valid document.

    A valid document exists in the repository and has at least one page.
    """

    pass


class PageNotFoundError(ResourceNotFoundError):
    """Raised when a page id does not resolve to a page of the given document."""

    pass


class ValidationError(DomainError):
    """Raised when data validation fails."""

    pass


class UnknownBackendError(ValidationError):
    """Raised when no adapter is registered for a repository backend."""

    pass


class RepositorySchemaError(DomainError):
    """Raised when the repository lacks a field-set or field the adapter depends on.

    This is a setup defect (element sets not installed), never a user error.
    """

    pass


class ElementNotFoundError(RepositorySchemaError):
    """Raised when an element cannot be resolved by (element name, element set name)."""

    def __init__(self, element_name: str, element_set_name: str):
        self.element_name = element_name
        self.element_set_name = element_set_name
        super().__init__(f"Element '{element_name}' does not exist in element set '{element_set_name}'")
