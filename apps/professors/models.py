"""
Professor entity for the directory.

Like departments, professors are transient copies of API records.
The department reference is optional for display; the API enforces that it
resolves to an existing department.
"""

from dataclasses import dataclass
from typing import Optional

from apps.departments.models import DepartmentSummary


@dataclass
class Professor:
    """Represents a professor as returned by the API."""

    id: Optional[int]
    first_name: str
    last_name: str
    email: str
    title: Optional[str] = None
    department: Optional[DepartmentSummary] = None

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def department_id(self):
        return self.department.id if self.department else None

    @classmethod
    def from_json(cls, data: dict) -> 'Professor':
        """
        Build a professor from an API payload.

        The department may arrive as a nested object or only as a
        departmentId; both are accepted. Any other department value is
        ignored.
        """
        department = None
        if isinstance(data.get('department'), dict):
            department = DepartmentSummary.from_json(data['department'])
        elif data.get('departmentId') is not None:
            department = DepartmentSummary(id=data['departmentId'])

        return cls(
            id=data.get('id'),
            first_name=data.get('firstName') or '',
            last_name=data.get('lastName') or '',
            email=data.get('email') or '',
            title=data.get('title') or None,
            department=department,
        )

    def to_payload(self) -> dict:
        return {
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'title': self.title,
            'departmentId': self.department_id,
        }
