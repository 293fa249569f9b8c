"""
Template tags and filters for the directory.

Filters:
- or_na: Show "N/A" for missing values
- department_code: Code of a professor's department, or "N/A"

Usage:
    {% load directory_tags %}

    {{ department.year_established|or_na }}
    {{ professor|department_code }}
"""

from django import template

register = template.Library()


@register.filter
def or_na(value):
    """
    Return value, or "N/A" when it is None or blank.

    Examples:
        1985 -> 1985
        None -> "N/A"
        ""   -> "N/A"
    """
    if value is None or value == '':
        return 'N/A'
    return value


@register.filter
def department_code(professor):
    """Return the code of the professor's department, or "N/A"."""
    department = getattr(professor, 'department', None)
    if department is None:
        return 'N/A'
    return department.code or 'N/A'
