"""Redirect target path validation

Functions:
    validate_url_path(raw: str) -> UrlPath
        Validate a candidate target path against the allowed character set.

The allowed set is letters, digits and `/ _ . - ? = & #`. Anything else
(whitespace, quotes, angle brackets, control characters, non-ASCII letters)
is rejected. Validation never rewrites the input: the returned UrlPath holds
exactly the string that was given, leading '/' included.

Example:
    >>> from linkbridge.utils import validate_url_path
    >>> str(validate_url_path('/docs/getting-started/'))
    '/docs/getting-started/'
    >>> validate_url_path('bad path')
    Traceback (most recent call last):
        ...
    linkbridge.exceptions.InvalidUrlPathError: Invalid URL path 'bad path': character ' ' at position 3 is not allowed.
"""

from beartype import beartype

from linkbridge.exceptions import InvalidUrlPathError
from linkbridge.models.url_path_model import UrlPath
from linkbridge.utils.constants import URL_PATH_ALLOWED_CHARS


@beartype
def validate_url_path(raw: str) -> UrlPath:
    """Validate a target path and wrap it in a UrlPath

    Args:
        raw (str):
            Candidate target path, e.g. 'api/v1/users'.

    Returns:
        UrlPath: the validated path, value identical to `raw`.

    Raises:
        InvalidUrlPathError:
            If `raw` is empty or holds a character outside the allowed set.
        BeartypeCallHintParamViolation:
            If `raw` is not a string.
    """
    if not raw:
        raise InvalidUrlPathError('Invalid URL path: path must be a non-empty string.')

    for position, character in enumerate(raw):
        if character not in URL_PATH_ALLOWED_CHARS:
            raise InvalidUrlPathError(
                f'Invalid URL path {raw!r}: character {character!r} at position {position} is not allowed.'
            )

    return UrlPath(raw)
