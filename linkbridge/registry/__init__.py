from linkbridge.registry.base import RedirectRegistryBase
from linkbridge.registry.jsonfile import JsonRedirectRegistry


__all__ = [
    'RedirectRegistryBase',
    'JsonRedirectRegistry',
]
