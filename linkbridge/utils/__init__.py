from linkbridge.utils.config import LinkBridgeConfig, load_config
from linkbridge.utils.helpers import utc_now, timestamp_millis, format_timestamp, parse_timestamp, normalize_timestamp
from linkbridge.utils.validator import validate_url_path
from linkbridge.utils.shortener import base62_encode, base62_decode, generate_short_name
from linkbridge.utils.renderer import render_redirect_page
from linkbridge.utils.logging import initialize_logging


__all__ = [
    'LinkBridgeConfig',
    'load_config',
    'utc_now',
    'timestamp_millis',
    'format_timestamp',
    'parse_timestamp',
    'normalize_timestamp',
    'validate_url_path',
    'base62_encode',
    'base62_decode',
    'generate_short_name',
    'render_redirect_page',
    'initialize_logging',
]
