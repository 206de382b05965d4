"""Application-wide exceptions for linkbridge.

Classes:
    LinkBridgeError:
        Base exception for all application-specific errors.

    InvalidUrlPathError:
        Raised when a target path contains characters outside the allowed set.

    RedirectIOError:
        Raised when the output directory or a redirect page can't be written.

    ConfigurationError:
        Base exception for all configuration errors.

    BadConfigurationError:
        Raised when the configuration file holds invalid values.

Registry-specific exceptions live in `linkbridge.registry.exceptions`.
"""


class LinkBridgeError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkbridge_error'


class InvalidUrlPathError(LinkBridgeError):
    """Raised when a target URL path fails validation."""

    error_code = 'input:invalid_url_path'


class RedirectIOError(LinkBridgeError):
    """Raised when creating the output directory or writing a redirect page fails."""

    error_code = 'io:redirect_io_error'


class ConfigurationError(LinkBridgeError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
