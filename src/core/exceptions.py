"""Custom exceptions shared across layers."""


class CatalogError(Exception):
    """Top-level exception for anything going wrong in the catalog."""


class InvalidRequestError(CatalogError):
    """Request data cannot be interpreted (bad page size, negative price, ...)."""


class DuplicateGameError(CatalogError):
    """A game with the same title already exists for this publisher."""


class GameNotFoundError(CatalogError):
    """No game is registered under the requested ID."""


class RepositoryError(CatalogError):
    """Persistence layer could not complete the operation."""


class ConflictError(RepositoryError):
    """Attempted to store a record under an ID that is already taken."""
