"""
Context processors for the navigation shell.

Provides the site name and header navigation with the active item marked.
"""

from django.conf import settings
from django.urls import reverse


NAV_ITEMS = [
    ('Home', 'core:home'),
    ('Departments', 'departments:department_list'),
    ('Professors', 'professors:professor_list'),
    ('About', 'core:about'),
]


def navigation(request):
    """
    Returns:
        dict with:
        - site_name: Title shown in the header and footer
        - nav_items: list of {'label', 'url', 'active'}
    """
    path = request.path
    nav_items = []
    for label, url_name in NAV_ITEMS:
        url = reverse(url_name)
        if url == '/':
            active = path == '/'
        else:
            active = path.startswith(url)
        nav_items.append({'label': label, 'url': url, 'active': active})

    return {
        'site_name': getattr(settings, 'SITE_NAME', 'University Directory'),
        'nav_items': nav_items,
    }
