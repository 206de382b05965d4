import functools
from typing import TypeVar, Any
from collections.abc import Callable

from linkbridge.registry.exceptions import RegistryWriteError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_registry_write_error(method: F) -> F:
    """Wrap registry methods writing to disk to handle file system errors

    Args:
        method (Callable[..., Any]):
            Registry method performing file writes which may raise OSError.
            The first positional argument after self is the destination path.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises RegistryWriteError on file system failures.

    Example:
        >>> @handle_registry_write_error
        ... def persist(self, destination=None):
        ...     write_text_atomically(destination, "[]")
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except OSError as e:
            destination = args[0] if args and args[0] is not None else kwargs.get('destination') or self.path
            raise RegistryWriteError(f"Can't write registry to '{destination}'.") from e

    return wrapper
