import string

# Characters allowed in a redirect target path
URL_PATH_ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits + '/_.-?=&#')

# Base62 alphabet used for short names: digits, then lowercase, then uppercase
BASE62_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase

# Redirect page file extension
REDIRECT_FILE_SUFFIX = '.html'

# Defaults for the output directory and the registry file stored inside it
DEFAULT_OUTPUT_DIR = 's'
DEFAULT_REGISTRY_FILE = 'registry.json'

# Environment variables
OUTPUT_DIR_ENV = 'LINKBRIDGE_OUTPUT_DIR'
REGISTRY_FILE_ENV = 'LINKBRIDGE_REGISTRY_FILE'
CONFIG_FILE_ENV = 'LINKBRIDGE_CONFIG_FILE'
LOG_LEVEL_ENV = 'LINKBRIDGE_LOG_LEVEL'
