from dataclasses import dataclass


@dataclass(frozen=True)
class UrlPath:
    """Represent a validated redirect target path.

    Instances are created by `linkbridge.utils.validate_url_path()`, which
    guarantees the value is non-empty and only holds characters from the
    allowed set. The value is kept exactly as given (no normalization).

    Attributes:
        value (str):
            The validated target path, e.g. '/docs/getting-started/'.

    Example:
        >>> from linkbridge.utils import validate_url_path
        >>> path = validate_url_path('api/v1/users')
        >>> str(path)
        'api/v1/users'
    """
    value: str

    def __str__(self) -> str:
        return self.value
