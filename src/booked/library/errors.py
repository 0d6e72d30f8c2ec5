# ABOUTME: Exception taxonomy for library store operations.
# ABOUTME: Every failure is raised before any mutation, so state is unchanged on error.


class LibraryError(Exception):
    """Base class for all failures raised by the library store."""


class DuplicateKeyError(LibraryError):
    """Raised when adding a book whose ISBN is already in the library."""


class CollectionNotFoundError(LibraryError):
    """Raised when a caller with no library attempts a mutation."""


class RecordNotFoundError(LibraryError):
    """Raised when the ISBN is not present in the addressed library."""


class InvalidChapterError(LibraryError):
    """Raised when a chapter number is out of range for the book."""


class SelfFollowError(LibraryError):
    """Raised when an account tries to follow itself."""


class NoFollowListError(LibraryError):
    """Raised when unfollowing before ever following anyone."""
