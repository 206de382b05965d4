"""linkbridge: static HTML redirect pages with short, unique names.

Given a target path, linkbridge writes `<output dir>/<short name>.html`, a page
that forwards visitors via meta refresh, JavaScript and a fallback link, and
records the short name → target mapping in a JSON registry.

Example:
    >>> from linkbridge import Redirector
    >>> redirector = Redirector('api/v1/users')
    >>> redirector.set_path('redirects')
    >>> page = redirector.write_redirects()
"""

from linkbridge.exceptions import (
    LinkBridgeError,
    InvalidUrlPathError,
    RedirectIOError,
    ConfigurationError,
    BadConfigurationError,
)
from linkbridge.models import UrlPath, RedirectEntryModel
from linkbridge.registry import RedirectRegistryBase, JsonRedirectRegistry
from linkbridge.registry.exceptions import (
    RegistryError,
    RegistryLoadError,
    RegistryWriteError,
    DuplicateShortNameError,
    RedirectNotFoundError,
)
from linkbridge.redirector import Redirector
from linkbridge.utils import (
    validate_url_path,
    generate_short_name,
    render_redirect_page,
    initialize_logging,
)


__all__ = [
    'Redirector',
    'UrlPath',
    'RedirectEntryModel',
    'RedirectRegistryBase',
    'JsonRedirectRegistry',
    'validate_url_path',
    'generate_short_name',
    'render_redirect_page',
    'initialize_logging',
    'LinkBridgeError',
    'InvalidUrlPathError',
    'RedirectIOError',
    'ConfigurationError',
    'BadConfigurationError',
    'RegistryError',
    'RegistryLoadError',
    'RegistryWriteError',
    'DuplicateShortNameError',
    'RedirectNotFoundError',
]
