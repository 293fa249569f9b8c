"""
Forms for departments app.

Validation is limited to what can be checked without the API: required
fields, code format, and a year that is not in the future. Code uniqueness
is enforced by the API and reported back through add_api_error().
"""

from django import forms
from django.core.exceptions import ValidationError
from django.utils import timezone

from apps.core.forms import INPUT_CLASS, ApiFormMixin
from .models import Department


class DepartmentForm(ApiFormMixin, forms.Form):
    """
    Form for creating and editing departments.
    """

    api_field_map = {
        'code': 'code',
        'name': 'name',
        'yearEstablished': 'year_established',
    }

    code = forms.CharField(
        max_length=10,
        help_text='Short identifier (e.g., CS, MATH). Will be converted to uppercase.',
        widget=forms.TextInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'e.g., CS',
            'style': 'text-transform: uppercase;',
        }),
    )
    name = forms.CharField(
        max_length=100,
        widget=forms.TextInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'e.g., Computer Science',
        }),
    )
    year_established = forms.IntegerField(
        required=False,
        min_value=1000,
        label='Year established',
        widget=forms.NumberInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'e.g., 1985',
        }),
    )

    @classmethod
    def from_department(cls, department, **kwargs):
        """Form pre-populated from an existing department (edit mode)."""
        return cls(initial={
            'code': department.code,
            'name': department.name,
            'year_established': department.year_established,
        }, **kwargs)

    def clean_code(self):
        """Convert code to uppercase."""
        code = self.cleaned_data.get('code')
        if code:
            code = code.upper().strip()
        if not code:
            raise ValidationError('Department code is required.')
        return code

    def clean_name(self):
        name = self.cleaned_data.get('name', '').strip()
        if not name:
            raise ValidationError('Department name is required.')
        return name

    def clean_year_established(self):
        """Year established cannot be in the future."""
        year = self.cleaned_data.get('year_established')
        if year is not None and year > timezone.now().year:
            raise ValidationError('Year established cannot be in the future.')
        return year

    def to_department(self, pk=None):
        """Build the Department to send to the API."""
        return Department(
            id=pk,
            code=self.cleaned_data['code'],
            name=self.cleaned_data['name'],
            year_established=self.cleaned_data.get('year_established'),
        )
