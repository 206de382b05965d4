"""Unit tests for render_redirect_page() in renderer.py.

Test coverage includes:

1. Page structure
   - HTML5 doctype, charset, meta refresh, script redirect and fallback link,
     in that order.

2. Target substitution
   - The target appears verbatim in all three redirect mechanisms.

3. Determinism
   - Rendering the same target twice gives identical output.
"""

import pytest

from linkbridge.utils import render_redirect_page, validate_url_path


@pytest.fixture
def page():
    return render_redirect_page(validate_url_path('api/v1/users'))


# -------------------------------
# 1. Page structure
# -------------------------------


def test_page_is_html5_document(page):
    assert page.startswith('<!DOCTYPE HTML>')
    assert '<html lang="en-US">' in page
    assert page.rstrip().endswith('</html>')


def test_redirect_mechanisms_are_in_order(page):
    """Charset, meta refresh, script and fallback link appear in order."""
    positions = [
        page.index('<meta charset="UTF-8">'),
        page.index('<meta http-equiv="refresh"'),
        page.index('window.location.href'),
        page.index('<a href='),
    ]
    assert positions == sorted(positions)


def test_page_has_human_readable_fallback(page):
    assert 'If you are not redirected automatically' in page
    assert '<title>Page Redirection</title>' in page


# -------------------------------
# 2. Target substitution
# -------------------------------


def test_target_appears_in_all_mechanisms(page):
    assert 'content="0; url=api/v1/users"' in page
    assert 'window.location.href = "api/v1/users";' in page
    assert "<a href='api/v1/users'>" in page


@pytest.mark.parametrize('raw', ['/docs/getting-started/', 'search?q=term&page=2', 'page#section'])
def test_target_is_inserted_verbatim(raw):
    """No escaping or normalization is applied to validated targets."""
    page = render_redirect_page(validate_url_path(raw))
    assert page.count(raw) == 3


# -------------------------------
# 3. Determinism
# -------------------------------


def test_rendering_is_deterministic():
    target = validate_url_path('api/v2/users')
    assert render_redirect_page(target) == render_redirect_page(target)
    assert render_redirect_page(target) == render_redirect_page(validate_url_path('api/v2/users'))
