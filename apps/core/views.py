"""
Views for the navigation shell.

Includes:
- Home and About pages
- render_deferred: the loading-then-content pattern shared by list and
  detail views
"""

from django.shortcuts import render
from django.views.decorators.http import require_GET


def render_deferred(request, template_name, partial_name, loader, context=None):
    """
    Render a page whose data is fetched by a follow-up HTMX request.

    A normal request gets the full page with a loading indicator that
    triggers an HTMX GET to the same URL. That HTMX request runs loader()
    and gets only the partial.

    Args:
        request: HttpRequest
        template_name: Full page template (shows the loading indicator)
        partial_name: Template rendered with the loaded data
        loader: Callable returning a dict merged into the partial context
        context: Extra context shared by both templates
    """
    context = dict(context or {})
    if request.htmx:
        context.update(loader())
        return render(request, partial_name, context)
    return render(request, template_name, context)


@require_GET
def home_view(request):
    return render(request, 'core/home.html')


@require_GET
def about_view(request):
    return render(request, 'core/about.html')
