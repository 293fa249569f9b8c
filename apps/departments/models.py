"""
Department entity for the directory.

Departments are not stored locally. Instances are transient copies of the
records served by the directory API and are discarded after each request.

Notes:
- Code is a short identifier (e.g., "CS", "MATH")
- Year established is optional
- A department owns zero or more professors by reference
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Department:
    """Represents a university department as returned by the API."""

    id: Optional[int]
    code: str
    name: str
    year_established: Optional[int] = None

    def __str__(self):
        return f"{self.name} ({self.code})"

    @classmethod
    def from_json(cls, data: dict) -> 'Department':
        """Build a department from an API payload (camelCase keys)."""
        return cls(
            id=data.get('id'),
            code=data.get('code') or '',
            name=data.get('name') or '',
            year_established=data.get('yearEstablished'),
        )

    def to_payload(self) -> dict:
        """Request body for create/update. The id travels in the URL, never the body."""
        return {
            'code': self.code,
            'name': self.name,
            'yearEstablished': self.year_established,
        }


@dataclass
class DepartmentSummary:
    """The department reference embedded in a professor payload."""

    id: Optional[int]
    code: str = ''
    name: str = ''

    def __str__(self):
        return self.code or self.name or str(self.id)

    @classmethod
    def from_json(cls, data: dict) -> 'DepartmentSummary':
        return cls(
            id=data.get('id'),
            code=data.get('code') or '',
            name=data.get('name') or '',
        )
