from linkbridge.registry.jsonfile.json_registry import JsonRedirectRegistry


__all__ = [
    'JsonRedirectRegistry',
]
