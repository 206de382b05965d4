"""Redirect page rendering

The redirect page forwards visitors three ways, so it works whatever the
browser allows:
    - meta refresh tag (works everywhere, no scripting needed)
    - JavaScript location assignment (fastest when scripting is enabled)
    - a plain fallback link for manual navigation

The page is a fixed template with a single substitution point. Targets come
from validate_url_path(), whose character set holds no quotes or angle
brackets, so the target is inserted verbatim in all three places.
"""

from linkbridge.models.url_path_model import UrlPath


REDIRECT_PAGE_TEMPLATE = """<!DOCTYPE HTML>
<html lang="en-US">

<head>
    <meta charset="UTF-8">
    <meta http-equiv="refresh" content="0; url={target}">
    <script type="text/javascript">
        window.location.href = "{target}";
    </script>
    <title>Page Redirection</title>
</head>

<body>
    <!-- Note: don't tell people to `click` the link, just tell them that it is a link. -->
    If you are not redirected automatically, follow this <a href='{target}'>link to the new location</a>.
</body>

</html>
"""


def render_redirect_page(target: UrlPath) -> str:
    """Render the complete HTML5 redirect page for a target path

    Args:
        target (UrlPath): validated target path

    Returns:
        str: the page content, identical for identical targets.

    Example:
        >>> from linkbridge.utils import validate_url_path
        >>> page = render_redirect_page(validate_url_path('api/v1/users'))
        >>> 'content="0; url=api/v1/users"' in page
        True
    """
    return REDIRECT_PAGE_TEMPLATE.format(target=target.value)
