from datetime import datetime
from typing import Any, TypeAlias
from collections.abc import Callable


# Type aliases for registry records and documents
RegistryRecord: TypeAlias = dict[str, Any]
RegistryDocument: TypeAlias = list[RegistryRecord]

# Source of the current instant (injected for deterministic tests)
Clock: TypeAlias = Callable[[], datetime]
