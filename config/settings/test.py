"""
Django test settings for the university directory project.

Used by pytest (see [tool.pytest.ini_options] in pyproject.toml).
"""

from .base import *

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

DIRECTORY_API_URL = 'http://directory-api.test/api/v1'
DIRECTORY_API_TIMEOUT = None

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['null'],
            'level': 'DEBUG',
            'propagate': True,
        },
    },
}
