"""
Tests for the directory API client and entity parsing.
"""

from unittest.mock import MagicMock

import requests
from django.test import SimpleTestCase, override_settings

from apps.core.api import ApiError, DirectoryApiClient, NotFoundError, get_client
from apps.departments.models import Department, DepartmentSummary
from apps.professors.models import Professor
from tests.helpers import fake_response

BASE_URL = 'http://directory-api.test/api/v1'


class ApiClientTestCase(SimpleTestCase):

    def setUp(self):
        self.session = MagicMock()
        self.session.headers = {}
        self.api = DirectoryApiClient(BASE_URL, session=self.session)


# =============================================================================
# Reads
# =============================================================================

class GetTests(ApiClientTestCase):

    def test_get_all_parses_departments(self):
        self.session.request.return_value = fake_response(200, [
            {'id': 1, 'code': 'CS', 'name': 'Computer Science', 'yearEstablished': 1985},
            {'id': 2, 'code': 'MATH', 'name': 'Mathematics'},
        ])

        departments = self.api.departments.get_all()

        self.session.request.assert_called_once_with(
            'GET', f'{BASE_URL}/departments', timeout=None
        )
        self.assertEqual(departments, [
            Department(id=1, code='CS', name='Computer Science', year_established=1985),
            Department(id=2, code='MATH', name='Mathematics', year_established=None),
        ])

    def test_get_one_uses_identifier_path(self):
        self.session.request.return_value = fake_response(200, {
            'id': 10, 'firstName': 'Ada', 'lastName': 'Lovelace',
            'email': 'ada@university.edu', 'title': 'Professor',
            'department': {'id': 1, 'code': 'CS', 'name': 'Computer Science'},
        })

        professor = self.api.professors.get_one(10)

        self.session.request.assert_called_once_with(
            'GET', f'{BASE_URL}/professors/10', timeout=None
        )
        self.assertEqual(professor.full_name, 'Ada Lovelace')
        self.assertEqual(professor.department, DepartmentSummary(id=1, code='CS', name='Computer Science'))

    def test_get_one_not_found(self):
        self.session.request.return_value = fake_response(404, {
            'status': 404, 'error': 'Not Found', 'message': 'Department with id 99 not found',
        })

        with self.assertRaises(NotFoundError) as ctx:
            self.api.departments.get_one(99)

        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.message, 'Department with id 99 not found')

    def test_get_all_rejects_non_list_body(self):
        self.session.request.return_value = fake_response(200, {'items': []})

        with self.assertRaises(ApiError):
            self.api.departments.get_all()

    def test_transport_error_is_api_error(self):
        self.session.request.side_effect = requests.ConnectionError('connection refused')

        with self.assertRaises(ApiError) as ctx:
            self.api.departments.get_all()

        self.assertIsNone(ctx.exception.status_code)
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    def test_server_error_without_json_body(self):
        self.session.request.return_value = fake_response(500, text='Internal Server Error')

        with self.assertRaises(ApiError) as ctx:
            self.api.professors.get_all()

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertIsNone(ctx.exception.message)

    def test_get_one_null_body_is_api_error(self):
        response = fake_response(200, {})
        response.json.return_value = None
        response.content = b'null'
        self.session.request.return_value = response

        with self.assertRaises(ApiError) as ctx:
            self.api.departments.get_one(5)

        self.assertEqual(ctx.exception.status_code, 200)

    def test_get_one_list_body_is_api_error(self):
        self.session.request.return_value = fake_response(200, [{'id': 5}])

        with self.assertRaises(ApiError):
            self.api.professors.get_one(5)

    def test_get_all_with_non_object_item_is_api_error(self):
        self.session.request.return_value = fake_response(200, [
            {'id': 1, 'code': 'CS', 'name': 'Computer Science'},
            'MATH',
        ])

        with self.assertRaises(ApiError):
            self.api.departments.get_all()


# =============================================================================
# Writes
# =============================================================================

class WriteTests(ApiClientTestCase):

    def test_create_posts_to_collection_without_id(self):
        self.session.request.return_value = fake_response(201, {
            'id': 3, 'code': 'PHYS', 'name': 'Physics', 'yearEstablished': 1990,
        })
        entity = Department(id=None, code='PHYS', name='Physics', year_established=1990)

        created = self.api.departments.create(entity)

        self.session.request.assert_called_once_with(
            'POST', f'{BASE_URL}/departments', timeout=None,
            json={'code': 'PHYS', 'name': 'Physics', 'yearEstablished': 1990},
        )
        self.assertEqual(created.id, 3)

    def test_update_puts_to_existing_id(self):
        self.session.request.return_value = fake_response(200, {
            'id': 10, 'firstName': 'Ada', 'lastName': 'King',
            'email': 'ada@university.edu', 'title': None, 'departmentId': 1,
        })
        entity = Professor(
            id=10, first_name='Ada', last_name='King', email='ada@university.edu',
            department=DepartmentSummary(id=1),
        )

        updated = self.api.professors.update(10, entity)

        self.session.request.assert_called_once_with(
            'PUT', f'{BASE_URL}/professors/10', timeout=None,
            json={
                'firstName': 'Ada', 'lastName': 'King', 'email': 'ada@university.edu',
                'title': None, 'departmentId': 1,
            },
        )
        self.assertEqual(updated.last_name, 'King')
        self.assertEqual(updated.department_id, 1)

    def test_update_with_empty_response_keeps_identifier(self):
        self.session.request.return_value = fake_response(204)
        entity = Department(id=None, code='CS', name='Computing')

        updated = self.api.departments.update(1, entity)

        self.assertEqual(updated.id, 1)
        self.assertEqual(updated.name, 'Computing')

    def test_delete(self):
        self.session.request.return_value = fake_response(204)

        self.assertIsNone(self.api.departments.delete(1))
        self.session.request.assert_called_once_with(
            'DELETE', f'{BASE_URL}/departments/1', timeout=None
        )

    def test_delete_conflict_carries_structured_code(self):
        self.session.request.return_value = fake_response(409, {
            'code': 'DEPARTMENT_IN_USE', 'message': 'Department has professors assigned.',
        })

        with self.assertRaises(ApiError) as ctx:
            self.api.departments.delete(1)

        self.assertTrue(ctx.exception.is_conflict)
        self.assertEqual(ctx.exception.code, 'DEPARTMENT_IN_USE')

    def test_validation_errors_are_collected(self):
        self.session.request.return_value = fake_response(400, {
            'message': 'Validation failed',
            'errors': {'code': 'A department with this code already exists.'},
        })

        with self.assertRaises(ApiError) as ctx:
            self.api.departments.create(Department(id=None, code='CS', name='CS'))

        self.assertFalse(ctx.exception.is_conflict)
        self.assertEqual(ctx.exception.errors, {'code': 'A department with this code already exists.'})


# =============================================================================
# Configuration and parsing
# =============================================================================

class ConfigurationTests(SimpleTestCase):

    @override_settings(DIRECTORY_API_URL='http://example.test/api/', DIRECTORY_API_TIMEOUT=5.0)
    def test_get_client_reads_settings(self):
        client = get_client()

        self.assertEqual(client.departments.url(), 'http://example.test/api/departments')
        self.assertEqual(client.professors.url(4), 'http://example.test/api/professors/4')
        self.assertEqual(client.departments.timeout, 5.0)
        self.assertEqual(client.session.headers['Accept'], 'application/json')


class EntityParsingTests(SimpleTestCase):

    def test_professor_with_scalar_department_is_ignored(self):
        professor = Professor.from_json({
            'id': 5, 'firstName': 'Grace', 'lastName': 'Hopper',
            'email': 'grace@university.edu', 'department': 'CS',
        })

        self.assertIsNone(professor.department)

    def test_scalar_department_falls_back_to_department_id(self):
        professor = Professor.from_json({
            'id': 5, 'firstName': 'Grace', 'lastName': 'Hopper',
            'email': 'grace@university.edu', 'department': 'CS', 'departmentId': 1,
        })

        self.assertEqual(professor.department_id, 1)

    def test_professor_with_department_id_only(self):
        professor = Professor.from_json({
            'id': 5, 'firstName': 'Grace', 'lastName': 'Hopper',
            'email': 'grace@university.edu', 'departmentId': 2,
        })

        self.assertEqual(professor.department_id, 2)
        self.assertIsNone(professor.title)

    def test_professor_without_department(self):
        professor = Professor.from_json({
            'id': 5, 'firstName': 'Grace', 'lastName': 'Hopper', 'email': 'grace@university.edu',
        })

        self.assertIsNone(professor.department)
        self.assertIsNone(professor.to_payload()['departmentId'])

    def test_department_payload_excludes_id(self):
        payload = Department(id=7, code='CS', name='Computer Science').to_payload()

        self.assertNotIn('id', payload)
        self.assertIsNone(payload['yearEstablished'])
