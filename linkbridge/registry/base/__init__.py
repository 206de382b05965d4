from linkbridge.registry.base.redirect_registry_base import RedirectRegistryBase


__all__ = [
    'RedirectRegistryBase',
]
