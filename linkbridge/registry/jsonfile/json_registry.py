"""Redirect registry backed by a JSON file

This module provides a JSON-file implementation of RedirectRegistryBase.

Responsibilities:
    - Load a registry from disk (a missing file is an empty registry);
    - Reject malformed or incompatible registry documents;
    - Keep entries in insertion order and refuse duplicate short names;
    - Persist the full registry atomically.

Registry file format (insertion order preserved):
[
    {
        "short_name": "uZHcMJG",
        "target": "api/v1/users",
        "created_at": "2025-10-15T12:00:00.000Z"
    }
]

Classes:
    JsonRedirectRegistry:
        Registry of RedirectEntryModel objects stored in a JSON document.

Example:
    >>> from linkbridge.registry import JsonRedirectRegistry
    >>> registry = JsonRedirectRegistry.load('s/registry.json')
    >>> len(registry)
    0
    >>> registry.insert(entry).persist()
    >>> [e.short_name for e in JsonRedirectRegistry.load('s/registry.json').entries()]
    ['uZHcMJG']
"""

import os
import json
import logging
from pathlib import Path
from collections.abc import Iterable, Iterator

from beartype import beartype

from linkbridge.models import RedirectEntryModel
from linkbridge.registry.base import RedirectRegistryBase
from linkbridge.registry.jsonfile.helpers import handle_registry_write_error
from linkbridge.registry.exceptions import (
    RegistryLoadError,
    RegistryWriteError,
    DuplicateShortNameError,
    RedirectNotFoundError,
)
from linkbridge.types import RegistryDocument
from linkbridge.utils.constants import BASE62_ALPHABET
from linkbridge.utils.files import write_text_atomically
from linkbridge.utils.validator import validate_url_path
from linkbridge.exceptions import InvalidUrlPathError


logger = logging.getLogger(__name__)


class JsonRedirectRegistry(RedirectRegistryBase):
    """Registry of redirects stored as a JSON array on disk

    Attributes:
        path (Path | None):
            Default destination used by persist(). Set by load(), may be None
            for registries that were built in memory only.

    Methods:
        load(source) -> JsonRedirectRegistry:
            Load a registry from a JSON file (classmethod).
            Raises RegistryLoadError when the file exists but is malformed.

        insert(entry: RedirectEntryModel) -> JsonRedirectRegistry:
            Register an entry. Raises DuplicateShortNameError on duplicates.

        contains(short_name: str) -> bool:
            Check whether a short name is registered.

        get(short_name: str) -> RedirectEntryModel:
            Look up an entry. Raises RedirectNotFoundError when absent.

        entries() -> Iterator[RedirectEntryModel]:
            Iterate over a snapshot of the entries in insertion order.

        persist(destination=None) -> None:
            Atomically write the registry. Raises RegistryWriteError on failure.

    Example:
        >>> registry = JsonRedirectRegistry(path='s/registry.json')
        >>> registry.insert(entry)
        <JsonRedirectRegistry>
        >>> registry.persist()
    """

    def __init__(self, entries: Iterable[RedirectEntryModel] = (), path: str | os.PathLike | None = None):
        """Initialize a registry from existing entries

        Args:
            entries (Iterable[RedirectEntryModel]):
                Entries to register, in order.
            path (str | os.PathLike | None):
                Default destination for persist().

        Raises:
            DuplicateShortNameError:
                If `entries` holds the same short name twice.
        """
        self.path = Path(path) if path is not None else None
        self._entries: dict[str, RedirectEntryModel] = {}
        for entry in entries:
            self.insert(entry)

    def __repr__(self) -> str:
        return f'<JsonRedirectRegistry path={str(self.path)!r} entries={len(self._entries)}>'

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def load(cls, source: str | os.PathLike) -> 'JsonRedirectRegistry':
        """Load a registry from a JSON file

        Args:
            source (str | os.PathLike):
                Registry file. The returned registry persists back to it by default.

        Returns:
            JsonRedirectRegistry:
                The loaded registry, empty if `source` doesn't exist.

        Raises:
            RegistryLoadError:
                If the file can't be read, isn't valid JSON, or doesn't match
                the registry format (a list of records with unique, valid short
                names, valid targets and ISO-8601 timestamps).
        """
        path = Path(source)
        try:
            with open(path, encoding='utf-8') as f:
                document = json.load(f)
        except FileNotFoundError:
            logger.debug('Registry file not found, starting empty.', extra={'registryPath': str(path)})
            return cls(path=path)
        except UnicodeDecodeError as e:
            raise RegistryLoadError(f"Registry at '{path}' is not valid UTF-8.") from e
        except json.JSONDecodeError as e:
            raise RegistryLoadError(f"Registry at '{path}' is not valid JSON.") from e
        except RecursionError as e:
            raise RegistryLoadError(f"Registry at '{path}' is nested too deeply to parse.") from e
        except OSError as e:
            raise RegistryLoadError(f"Can't read registry at '{path}'.") from e

        registry = cls(path=path)
        for entry in cls._parse_document(document, path):
            try:
                registry.insert(entry)
            except DuplicateShortNameError as e:
                raise RegistryLoadError(f"Registry at '{path}' holds duplicate short name '{entry.short_name}'.") from e

        logger.debug('Loaded registry.', extra={'registryPath': str(path), 'entries': len(registry)})
        return registry

    @staticmethod
    def _parse_document(document: object, path: Path) -> Iterator[RedirectEntryModel]:
        if not isinstance(document, list):
            raise RegistryLoadError(f"Registry at '{path}' must be a JSON array (given: {type(document).__name__}).")

        for index, record in enumerate(document):
            try:
                entry = RedirectEntryModel.from_dict(record)
                validate_url_path(entry.target)
            except (KeyError, TypeError, ValueError, InvalidUrlPathError) as e:
                raise RegistryLoadError(f"Registry at '{path}' has an invalid record at index {index}: {e}") from e

            if not entry.short_name or any(c not in BASE62_ALPHABET for c in entry.short_name):
                raise RegistryLoadError(
                    f"Registry at '{path}' has an invalid short name at index {index}: '{entry.short_name}'."
                )
            yield entry

    @beartype
    def insert(self, entry: RedirectEntryModel) -> 'JsonRedirectRegistry':
        """Register a new entry

        Args:
            entry (RedirectEntryModel): the entry to register

        Returns:
            JsonRedirectRegistry: self (for method chaining)

        Raises:
            DuplicateShortNameError:
                If the short name is already registered. The existing entry is kept.
        """
        if entry.short_name in self._entries:
            raise DuplicateShortNameError(f"Short name '{entry.short_name}' already exists.")

        self._entries[entry.short_name] = entry
        return self

    @beartype
    def contains(self, short_name: str) -> bool:
        return short_name in self._entries

    @beartype
    def get(self, short_name: str) -> RedirectEntryModel:
        """Retrieve a registered entry by short name

        Raises:
            RedirectNotFoundError: If the short name is not registered.
        """
        try:
            return self._entries[short_name]
        except KeyError:
            raise RedirectNotFoundError(f"Short name '{short_name}' not found.") from None

    def entries(self) -> Iterator[RedirectEntryModel]:
        return iter(tuple(self._entries.values()))

    def names(self) -> frozenset[str]:
        return frozenset(self._entries)

    def to_document(self) -> RegistryDocument:
        """Return the registry as a JSON-serializable list, in insertion order"""
        return [entry.to_dict() for entry in self._entries.values()]

    @handle_registry_write_error
    def persist(self, destination: str | os.PathLike | None = None) -> None:
        """Atomically write the full registry as a JSON array

        Parent directories are created as needed.

        Args:
            destination (str | os.PathLike | None):
                Target file. Defaults to the path the registry was loaded from.

        Raises:
            RegistryWriteError:
                If no destination is known or the file can't be written.
                The in-memory registry is left unchanged.
        """
        if destination is None and self.path is None:
            raise RegistryWriteError('No destination given and registry has no default path.')

        path = Path(destination) if destination is not None else self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        write_text_atomically(path, json.dumps(self.to_document(), indent=4) + '\n')
        logger.debug('Persisted registry.', extra={'registryPath': str(path), 'entries': len(self._entries)})
