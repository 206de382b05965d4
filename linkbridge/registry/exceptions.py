"""Exceptions related to redirect registry operations.

Classes:
    RegistryError:
        Generic base class for registry-related exceptions.

    RegistryLoadError:
        Raised when a persisted registry exists but can't be read or parsed.

    RegistryWriteError:
        Raised when the registry can't be persisted to disk.

    DuplicateShortNameError:
        Raised when inserting an entry whose short name is already registered.

    RedirectNotFoundError:
        Raised when looking up a short name that isn't registered.

Example:
    >>> from linkbridge.registry.exceptions import RegistryLoadError
    >>> raise RegistryLoadError("Registry at 's/registry.json' is not valid JSON.")
    Traceback (most recent call last):
        ...
    linkbridge.registry.exceptions.RegistryLoadError: Registry at 's/registry.json' is not valid JSON.
"""

from linkbridge.exceptions import LinkBridgeError


class RegistryError(LinkBridgeError):
    """Generic base class for registry-related exceptions."""

    error_code = 'registry:registry_error'


class RegistryLoadError(RegistryError):
    """Exception raised when a persisted registry is malformed or unreadable."""

    error_code = 'registry:load_error'


class RegistryWriteError(RegistryError):
    """Exception raised when persisting the registry fails.

    The in-memory registry is left untouched, so the caller may retry persisting.
    """

    error_code = 'registry:write_error'


class DuplicateShortNameError(RegistryError):
    """Exception raised when attempting to insert an entry whose short name already exists."""

    error_code = 'registry:duplicate_short_name'


class RedirectNotFoundError(RegistryError):
    """Exception raised when a short name is not found in the registry."""

    error_code = 'registry:redirect_not_found'
