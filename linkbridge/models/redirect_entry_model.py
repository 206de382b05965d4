from dataclasses import dataclass
from datetime import datetime
from typing import Any

from linkbridge.utils.constants import REDIRECT_FILE_SUFFIX
from linkbridge.utils.helpers import format_timestamp, parse_timestamp, normalize_timestamp


@dataclass(frozen=True)
class RedirectEntryModel:
    """Represent one published redirect.

    Entries are immutable once created: a changed target requires a new
    redirect (and a new short name), never an update of an existing entry.

    Attributes:
        short_name (str):
            The unique base62 identifier used as the redirect page's file name.
        target (str):
            The validated target path the redirect page forwards to.
        created_at (datetime):
            The instant the redirect was written. Stored as an aware UTC
            datetime truncated to milliseconds, the precision the registry keeps.

    Example:
        >>> from datetime import datetime, UTC
        >>> entry = RedirectEntryModel(
        ...     short_name='1kZ3aQx',
        ...     target='api/v1/users',
        ...     created_at=datetime(2025, 10, 15, tzinfo=UTC),
        ... )
        >>> entry.file_name
        '1kZ3aQx.html'
        >>> entry.to_dict()['created_at']
        '2025-10-15T00:00:00.000Z'
    """
    short_name: str
    target: str
    created_at: datetime

    def __post_init__(self):
        object.__setattr__(self, 'created_at', normalize_timestamp(self.created_at))

    @property
    def file_name(self) -> str:
        return f'{self.short_name}{REDIRECT_FILE_SUFFIX}'

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-serializable registry record for this entry"""
        return {
            'short_name': self.short_name,
            'target': self.target,
            'created_at': format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> 'RedirectEntryModel':
        """Build an entry from a registry record

        Args:
            record (dict):
                Mapping with 'short_name', 'target' and 'created_at' string values.

        Returns:
            RedirectEntryModel: the parsed entry.

        Raises:
            KeyError: if a required field is missing.
            TypeError: if the record is not a mapping or a field is not a string.
            ValueError: if 'created_at' is not a valid ISO-8601 timestamp.
        """
        if not isinstance(record, dict):
            raise TypeError(f'Registry record must be a JSON object (given type: {type(record).__name__}).')

        fields = {}
        for name in ('short_name', 'target', 'created_at'):
            value = record[name]
            if not isinstance(value, str):
                raise TypeError(f"Field '{name}' must be a string (given type: {type(value).__name__}).")
            fields[name] = value

        return cls(
            short_name=fields['short_name'],
            target=fields['target'],
            created_at=parse_timestamp(fields['created_at']),
        )
