"""
Forms for professors app.

The department select is filled from the departments the view fetched
from the API.
"""

from django import forms

from apps.core.forms import INPUT_CLASS, ApiFormMixin
from apps.departments.models import DepartmentSummary
from .models import Professor


class ProfessorForm(ApiFormMixin, forms.Form):
    """
    Form for creating and editing professors.

    Args:
        departments: Department list used for the department choices
    """

    api_field_map = {
        'firstName': 'first_name',
        'lastName': 'last_name',
        'email': 'email',
        'title': 'title',
        'departmentId': 'department',
    }

    first_name = forms.CharField(
        max_length=100,
        widget=forms.TextInput(attrs={'class': INPUT_CLASS}),
    )
    last_name = forms.CharField(
        max_length=100,
        widget=forms.TextInput(attrs={'class': INPUT_CLASS}),
    )
    email = forms.EmailField(
        widget=forms.EmailInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'name@university.edu',
        }),
    )
    title = forms.CharField(
        max_length=100,
        required=False,
        widget=forms.TextInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'e.g., Associate Professor',
        }),
    )
    department = forms.TypedChoiceField(
        coerce=int,
        widget=forms.Select(attrs={'class': INPUT_CLASS}),
    )

    def __init__(self, *args, departments=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.departments = {d.id: d for d in departments or []}
        self.fields['department'].choices = [('', '-- Select Department --')] + [
            (d.id, str(d)) for d in departments or []
        ]

    @classmethod
    def from_professor(cls, professor, **kwargs):
        """Form pre-populated from an existing professor (edit mode)."""
        return cls(initial={
            'first_name': professor.first_name,
            'last_name': professor.last_name,
            'email': professor.email,
            'title': professor.title or '',
            'department': professor.department_id,
        }, **kwargs)

    def to_professor(self, pk=None):
        """Build the Professor to send to the API."""
        department_id = self.cleaned_data['department']
        department = self.departments.get(department_id)
        return Professor(
            id=pk,
            first_name=self.cleaned_data['first_name'],
            last_name=self.cleaned_data['last_name'],
            email=self.cleaned_data['email'],
            title=self.cleaned_data.get('title') or None,
            department=DepartmentSummary(
                id=department_id,
                code=department.code if department else '',
                name=department.name if department else '',
            ),
        )
