"""
Django base settings for the university directory project.
Shared settings between development, test and production.

The directory has no database of its own: departments and professors are
read from and written to the remote directory API (see DIRECTORY_API_URL).
"""

from pathlib import Path
from decouple import config, Csv

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = config('SECRET_KEY', default='django-insecure-change-me-in-production')

# Application definition
DJANGO_APPS = [
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

THIRD_PARTY_APPS = [
    'django_htmx',
]

LOCAL_APPS = [
    'apps.core',
    'apps.departments',
    'apps.professors',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'django_htmx.middleware.HtmxMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.template.context_processors.csrf',
                'django.contrib.messages.context_processors.messages',
                'apps.core.context_processors.navigation',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'


# =============================================================================
# DATABASE - none, all entities live in the remote directory API
# =============================================================================
DATABASES = {}


# =============================================================================
# DIRECTORY API
# =============================================================================
# Base URL of the REST service exposing /departments and /professors
DIRECTORY_API_URL = config('DIRECTORY_API_URL', default='http://localhost:8080/api/v1')

# Seconds before an API call is abandoned. Empty means no timeout.
DIRECTORY_API_TIMEOUT = config(
    'DIRECTORY_API_TIMEOUT',
    default='',
    cast=lambda value: float(value) if value else None,
)

# Dotted path of the class used to surface success/error notifications
DIRECTORY_NOTIFIER = config(
    'DIRECTORY_NOTIFIER',
    default='apps.core.notifications.MessagesNotifier',
)

SITE_NAME = config('SITE_NAME', default='University Directory')


# =============================================================================
# MESSAGES - cookie storage, there are no sessions
# =============================================================================
MESSAGE_STORAGE = 'django.contrib.messages.storage.cookie.CookieStorage'


# =============================================================================
# INTERNATIONALIZATION & TIMEZONE
# =============================================================================
LANGUAGE_CODE = 'en-us'

TIME_ZONE = config('TIME_ZONE', default='UTC')

USE_I18N = True

USE_TZ = True


# =============================================================================
# STATIC FILES
# =============================================================================
STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

