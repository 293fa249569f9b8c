"""
URL configuration for the university directory project.

/                          Home
/about/                    About
/departments/...           Department list, detail, create, edit, delete
/professors/...            Professor list, detail, create, edit, delete
"""

from django.urls import path, include
from django.conf import settings

urlpatterns = [
    path('', include('apps.core.urls', namespace='core')),
    path('departments/', include('apps.departments.urls', namespace='departments')),
    path('professors/', include('apps.professors.urls', namespace='professors')),
]

if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    # Debug toolbar
    import debug_toolbar
    urlpatterns = [
        path('__debug__/', include(debug_toolbar.urls)),
    ] + urlpatterns
