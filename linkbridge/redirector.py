"""Redirect page generation

This module ties together validation, short name generation, page rendering
and the registry:

    - Step 1: Validate the target path (on construction)
    - Step 2: Create the output directory if it doesn't exist
    - Step 3: Load the registry for the current output directory (unless one was injected)
    - Step 4: Generate a short name not used by the registry or the output directory
    - Step 5: Render the redirect page and publish it atomically
    - Step 6: Register the redirect and persist the registry

Classes:
    Redirector:
        Writes one redirect page for a validated target path.

Example:
    >>> from linkbridge import Redirector
    >>> redirector = Redirector('api/v1/users')
    >>> redirector.set_path('redirects')
    >>> redirector.write_redirects()
    PosixPath('redirects/uZHcMJG.html')
    >>> redirector.registry.get(redirector.short_name).target
    'api/v1/users'

NOTE:
    - The load/insert/persist registry cycle is not locked. Callers writing
      redirects from several threads or processes must serialize access.
"""

import os
import logging
from pathlib import Path

from linkbridge.exceptions import RedirectIOError
from linkbridge.models import RedirectEntryModel, UrlPath
from linkbridge.registry import RedirectRegistryBase, JsonRedirectRegistry
from linkbridge.registry.exceptions import RegistryWriteError
from linkbridge.types import Clock
from linkbridge.utils.config import load_config
from linkbridge.utils.constants import REDIRECT_FILE_SUFFIX
from linkbridge.utils.files import write_text_atomically
from linkbridge.utils.helpers import utc_now
from linkbridge.utils.renderer import render_redirect_page
from linkbridge.utils.shortener import generate_short_name
from linkbridge.utils.validator import validate_url_path


logger = logging.getLogger(__name__)


class Redirector:
    """Generate a static HTML redirect page for a target path

    Attributes:
        target (UrlPath):
            Validated target path the page redirects to.
        path (Path):
            Output directory for redirect pages.
        registry (RedirectRegistryBase | None):
            Registry of written redirects. When not injected, loaded from
            `<path>/<registry file>` on first write and reloaded whenever
            set_path() points the redirector at another directory.
        clock (Clock):
            Source of the current instant, `utc_now` by default.
        entry (RedirectEntryModel | None):
            The redirect created by the last successful write, None before.

    Methods:
        set_path(path) -> None:
            Change the output directory for subsequent writes.

        render() -> str:
            Render the redirect page for the target.

        write_redirects() -> Path:
            Write the redirect page and register it.
            Raises RedirectIOError if the directory or page can't be written.
            Raises RegistryWriteError if the registry can't be persisted (the
            page is left on disk).
    """

    def __init__(
        self,
        target: str,
        registry: RedirectRegistryBase | None = None,
        clock: Clock | None = None,
    ):
        """Validate the target and apply the configured output directory

        Args:
            target (str):
                Target path to redirect to, e.g. 'api/v1/users'.
            registry (RedirectRegistryBase | None):
                Registry to record the redirect in. Defaults to the JSON
                registry stored in the output directory.
            clock (Clock | None):
                Callable returning the current instant. Defaults to utc_now().

        Raises:
            InvalidUrlPathError:
                If the target holds characters outside the allowed set or is empty.
            BadConfigurationError:
                If the configuration file is set but invalid.
        """
        self.target: UrlPath = validate_url_path(target)

        config = load_config()
        self.path: Path = config.output_dir
        self.registry_file: str = config.registry_file

        self.registry = registry
        self._loaded_registry: JsonRedirectRegistry | None = None
        self.clock = clock or utc_now
        self.entry: RedirectEntryModel | None = None

    def __repr__(self) -> str:
        return f'<Redirector target={self.target.value!r} path={str(self.path)!r}>'

    def __str__(self) -> str:
        return self.render()

    @property
    def short_name(self) -> str | None:
        return None if self.entry is None else self.entry.short_name

    @property
    def written(self) -> bool:
        return self.entry is not None

    def set_path(self, path: str | os.PathLike) -> None:
        """Set the output directory for subsequent writes

        No I/O happens here: the directory is created by write_redirects().
        """
        self.path = Path(path)

    def render(self) -> str:
        """Render the redirect page for the target"""
        return render_redirect_page(self.target)

    def _load_registry(self) -> None:
        """Load the default registry for the current output directory

        Injected or assigned registries are used as they are. A registry loaded
        here is replaced once set_path() moves the output directory elsewhere.
        """
        registry_path = self.path / self.registry_file
        if self.registry is None or (
            self.registry is self._loaded_registry and self._loaded_registry.path != registry_path
        ):
            self.registry = self._loaded_registry = JsonRedirectRegistry.load(registry_path)

    def _taken_names(self) -> set[str]:
        """Short names used by the registry or by pages already in the output directory"""
        names = set(self.registry.names())
        names.update(page.stem for page in self.path.glob(f'*{REDIRECT_FILE_SUFFIX}'))
        return names

    def write_redirects(self) -> Path:
        """Write the redirect page and record it in the registry

        Returns:
            Path: `<output dir>/<short name>.html`

        Raises:
            RedirectIOError:
                If the output directory can't be created or the page can't be written.
                Nothing is registered in that case.
            RegistryLoadError:
                If no registry was injected and the registry file is malformed.
            DuplicateShortNameError:
                If the registry already holds the generated short name.
            RegistryWriteError:
                If the registry can't be persisted. The page stays on disk and
                the entry stays registered in memory.
        """
        # 1- Create the output directory
        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RedirectIOError(f"Can't create output directory '{self.path}'.") from e

        # 2- Load the registry stored next to the pages unless one was injected
        self._load_registry()

        # 3- Pick a short name and render the page
        now = self.clock()
        try:
            short_name = generate_short_name(now, self._taken_names())
        except OSError as e:
            raise RedirectIOError(f"Can't list output directory '{self.path}'.") from e
        entry = RedirectEntryModel(short_name=short_name, target=self.target.value, created_at=now)
        page_path = self.path / entry.file_name

        # 4- Publish the page
        try:
            write_text_atomically(page_path, self.render())
        except OSError as e:
            raise RedirectIOError(f"Can't write redirect page '{page_path}'.") from e

        # 5- Register and persist
        self.registry.insert(entry)
        self.entry = entry
        try:
            self.registry.persist()
        except RegistryWriteError:
            logger.error(
                'Redirect page written but registry not persisted.',
                extra={'pagePath': str(page_path), 'shortName': short_name},
                exc_info=True,
            )
            raise

        logger.info(
            'Wrote redirect page.',
            extra={'pagePath': str(page_path), 'shortName': short_name, 'target': self.target.value},
        )
        return page_path
