"""Abstract base class for redirect registries.

This class establishes a consistent contract for all registry implementations,
regardless of the underlying storage (e.g., a JSON file, an in-memory mapping).

Responsibilities:
    - Provide an interface for inserting, checking and looking up RedirectEntryModel objects.
    - Preserve insertion order when enumerating entries.
    - Standardize error handling across storage implementations.

Example:
    Typical usage with a storage-specific implementation:

        >>> from linkbridge.registry import JsonRedirectRegistry

        >>> registry = JsonRedirectRegistry.load('s/registry.json')
        >>> registry.insert(entry)
        <JsonRedirectRegistry>
        >>> registry.contains(entry.short_name)
        True
        >>> registry.persist()
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from linkbridge.models import RedirectEntryModel


class RedirectRegistryBase(ABC):
    """Interface for redirect registries.

    Methods:
        insert(entry: RedirectEntryModel) -> RedirectRegistryBase:
            Register a new entry.
            Raises DuplicateShortNameError if the short name already exists.

        contains(short_name: str) -> bool:
            Check whether a short name is registered.

        get(short_name: str) -> RedirectEntryModel:
            Retrieve an entry by short name.
            Raises RedirectNotFoundError if the short name is not registered.

        entries() -> Iterator[RedirectEntryModel]:
            Iterate over a snapshot of all entries in insertion order.

        persist(destination=None) -> None:
            Write the registry to its storage.
            Raises RegistryWriteError on failure.

    Subclassing:
        Storage-specific implementations must extend this class and implement
        all abstract methods. names(), __contains__, __iter__ and __len__ are
        derived from entries() and contains().

    NOTE:
        - Entries are immutable once registered. The registry does not provide
          an interface to update or delete entries.
    """

    @abstractmethod
    def insert(self, entry: RedirectEntryModel) -> 'RedirectRegistryBase':
        """Register a new entry.

        Args:
            entry (RedirectEntryModel):
                The entry to register.

        Returns:
            RedirectRegistryBase: self (for method chaining)

        Raises:
            DuplicateShortNameError:
                If an entry with the same short name already exists. The existing
                entry is left untouched.
        """
        pass

    @abstractmethod
    def contains(self, short_name: str) -> bool:
        """Return True if the short name is registered."""
        pass

    @abstractmethod
    def get(self, short_name: str) -> RedirectEntryModel:
        """Retrieve a registered entry by short name.

        Raises:
            RedirectNotFoundError:
                If no entry with the given short name exists.
        """
        pass

    @abstractmethod
    def entries(self) -> Iterator[RedirectEntryModel]:
        """Iterate over the entries registered at call time, in insertion order.

        Later inserts don't affect an iterator that was already returned;
        call entries() again to restart from the first entry.
        """
        pass

    @abstractmethod
    def persist(self, destination=None) -> None:
        """Write the full registry to storage.

        Raises:
            RegistryWriteError:
                If the registry can't be written. The in-memory state is kept.
        """
        pass

    def names(self) -> frozenset[str]:
        """Return a snapshot of all registered short names."""
        return frozenset(entry.short_name for entry in self.entries())

    def __contains__(self, short_name: object) -> bool:
        return isinstance(short_name, str) and self.contains(short_name)

    def __iter__(self) -> Iterator[RedirectEntryModel]:
        return self.entries()

    def __len__(self) -> int:
        return sum(1 for _ in self.entries())
