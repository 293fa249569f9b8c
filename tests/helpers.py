"""
Shared test helpers.

- fake_response: stand-in for requests.Response
- RecordingNotifier: notifier that remembers what it was asked to show
- sample entities
"""

import json
from unittest.mock import MagicMock

from apps.core.notifications import Notifier
from apps.departments.models import Department, DepartmentSummary
from apps.professors.models import Professor


HTMX = {'HTTP_HX_REQUEST': 'true'}


def fake_response(status_code=200, json_data=None, text=''):
    """Build a MagicMock that behaves like requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.url = 'http://directory-api.test/api/v1'
    if json_data is not None:
        response.json.return_value = json_data
        response.content = json.dumps(json_data).encode()
    else:
        response.json.side_effect = ValueError('No JSON object could be decoded')
        response.content = text.encode()
    return response


class RecordingNotifier(Notifier):
    """Collects notifications instead of showing them."""

    successes = []
    errors = []

    @classmethod
    def reset(cls):
        cls.successes = []
        cls.errors = []

    def success(self, request, message):
        RecordingNotifier.successes.append(message)

    def error(self, request, message):
        RecordingNotifier.errors.append(message)


def computer_science():
    return Department(id=1, code='CS', name='Computer Science', year_established=1985)


def mathematics():
    return Department(id=2, code='MATH', name='Mathematics', year_established=None)


def ada():
    return Professor(
        id=10,
        first_name='Ada',
        last_name='Lovelace',
        email='ada@university.edu',
        title='Professor',
        department=DepartmentSummary(id=1, code='CS', name='Computer Science'),
    )


def alan():
    return Professor(
        id=11,
        first_name='Alan',
        last_name='Turing',
        email='alan@university.edu',
        title=None,
        department=None,
    )


def emmy():
    return Professor(
        id=12,
        first_name='Emmy',
        last_name='Noether',
        email='emmy@university.edu',
        title='Lecturer',
        department=DepartmentSummary(id=2, code='MATH', name='Mathematics'),
    )
