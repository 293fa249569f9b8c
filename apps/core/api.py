"""
Client for the remote directory API.

Endpoints (per resource):
- GET    /<resource>        -> list of entities
- GET    /<resource>/<id>   -> entity
- POST   /<resource>        -> created entity
- PUT    /<resource>/<id>   -> updated entity
- DELETE /<resource>/<id>   -> nothing

Every failure (transport error or non-2xx status) is raised as ApiError and
must be caught by the caller. There are no retries and no caching.
"""

import logging

import requests
from django.conf import settings

from apps.departments.models import Department
from apps.professors.models import Professor

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Raised when a directory API call fails.

    Attributes:
        status_code: HTTP status, or None when the request never got a response
        code: Structured error code from the response body, if any
        message: Server-provided message, if any
        errors: Field errors from the response body ({field: message}), if any
    """

    def __init__(self, description, status_code=None, code=None, message=None, errors=None):
        super().__init__(description)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.errors = errors or {}

    @property
    def is_conflict(self):
        """True when the server refused the change because of related records."""
        if self.status_code == 409:
            return True
        code = (self.code or '').upper()
        return 'CONSTRAINT' in code or 'IN_USE' in code


class NotFoundError(ApiError):
    """Raised for 404 responses."""


def _error_from_response(response, description):
    """Build an ApiError from an unsuccessful response, reading a JSON body if present."""
    code = message = None
    errors = {}
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        code = body.get('code') or body.get('error')
        message = body.get('message')
        if isinstance(body.get('errors'), dict):
            errors = body['errors']

    error_class = NotFoundError if response.status_code == 404 else ApiError
    return error_class(
        f'{description} failed with HTTP {response.status_code}',
        status_code=response.status_code,
        code=code,
        message=message,
        errors=errors,
    )


class ResourceClient:
    """
    CRUD calls for one REST collection.

    Args:
        session: requests.Session shared by the parent client
        base_url: API root, without trailing slash
        path: Collection name (e.g. 'departments')
        entity_class: Class with from_json()/to_payload()
        timeout: Seconds, or None for no timeout
    """

    def __init__(self, session, base_url, path, entity_class, timeout=None):
        self.session = session
        self.base_url = base_url.rstrip('/')
        self.path = path
        self.entity_class = entity_class
        self.timeout = timeout

    def url(self, pk=None):
        if pk is None:
            return f'{self.base_url}/{self.path}'
        return f'{self.base_url}/{self.path}/{pk}'

    def _request(self, method, url, **kwargs):
        description = f'{method} {url}'
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ApiError(f'{description} failed: {e}') from e

        if not response.ok:
            raise _error_from_response(response, description)

        logger.debug(f'{description} -> {response.status_code}')
        return response

    def _entity(self, response):
        """Parse an entity body, or None for an empty response."""
        if response.status_code == 204 or not response.content:
            return None
        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(f'Invalid JSON from {response.url}', status_code=response.status_code) from e
        if not isinstance(data, dict):
            raise ApiError(f'Expected an object from {response.url}', status_code=response.status_code)
        return self.entity_class.from_json(data)

    def get_all(self):
        response = self._request('GET', self.url())
        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(f'Invalid JSON from {self.url()}', status_code=response.status_code) from e
        if not isinstance(data, list):
            raise ApiError(f'Expected a list from {self.url()}', status_code=response.status_code)
        if not all(isinstance(item, dict) for item in data):
            raise ApiError(f'Expected a list of objects from {self.url()}', status_code=response.status_code)
        return [self.entity_class.from_json(item) for item in data]

    def get_one(self, pk):
        response = self._request('GET', self.url(pk))
        entity = self._entity(response)
        if entity is None:
            raise NotFoundError(f'GET {self.url(pk)} returned no body', status_code=response.status_code)
        return entity

    def create(self, entity):
        """POST to the collection. Returns the created entity, or the input if the body is empty."""
        response = self._request('POST', self.url(), json=entity.to_payload())
        return self._entity(response) or entity

    def update(self, pk, entity):
        response = self._request('PUT', self.url(pk), json=entity.to_payload())
        updated = self._entity(response) or entity
        if updated.id is None:
            updated.id = pk
        return updated

    def delete(self, pk):
        self._request('DELETE', self.url(pk))


class DirectoryApiClient:
    """
    Entry point for the directory API.

    Usage:
        client = get_client()
        departments = client.departments.get_all()
        client.professors.delete(3)
    """

    def __init__(self, base_url, timeout=None, session=None):
        self.session = session or requests.Session()
        self.session.headers.update({'Accept': 'application/json'})
        self.departments = ResourceClient(self.session, base_url, 'departments', Department, timeout)
        self.professors = ResourceClient(self.session, base_url, 'professors', Professor, timeout)


def get_client():
    """Build a client from settings. Views create one per request."""
    return DirectoryApiClient(
        base_url=settings.DIRECTORY_API_URL,
        timeout=settings.DIRECTORY_API_TIMEOUT,
    )
