from linkbridge.models.url_path_model import UrlPath
from linkbridge.models.redirect_entry_model import RedirectEntryModel


__all__ = [
    'UrlPath',
    'RedirectEntryModel',
]
