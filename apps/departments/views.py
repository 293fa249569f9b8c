"""
Views for departments app.

Includes:
- Department list view (table loaded by HTMX)
- Department detail view with assigned professors
- Department create/edit views
- Department delete (confirmation page + POST)
"""

import logging

from django.shortcuts import render, redirect
from django.views.decorators.http import require_GET, require_http_methods

from apps.core.api import ApiError, get_client
from apps.core.notifications import get_notifier
from apps.core.services import delete_entity, load
from apps.core.views import render_deferred
from .forms import DepartmentForm

logger = logging.getLogger(__name__)

CONFLICT_HINT = 'It may have professors assigned to it.'


def _search_departments(departments, search):
    """Filter departments by code or name (case-insensitive)."""
    if not search:
        return departments
    needle = search.lower()
    return [
        d for d in departments
        if needle in d.code.lower() or needle in d.name.lower()
    ]


def _department_table_context(request, client):
    search = request.GET.get('search', '').strip()
    state = load(
        client.departments.get_all,
        'Failed to fetch departments. Please try again.',
        description='departments',
    )
    return {
        'state': state,
        'departments': _search_departments(state.items, search),
        'search': search,
    }


@require_GET
def department_list_view(request):
    """
    List all departments.

    The first render shows a loading indicator; the table itself is
    fetched by an HTMX request to this same view.
    """
    client = get_client()
    return render_deferred(
        request,
        'departments/department_list.html',
        'departments/partials/department_table.html',
        lambda: _department_table_context(request, client),
        {'search': request.GET.get('search', '').strip()},
    )


@require_GET
def department_detail_view(request, pk):
    """
    View department details with the professors assigned to it.
    """
    client = get_client()

    def loader():
        state = load(
            lambda: client.departments.get_one(pk),
            'Failed to fetch department details.',
            description=f'department {pk}',
        )
        professors = None
        if not state.error:
            professors_state = load(
                client.professors.get_all,
                'Failed to fetch professors for this department.',
                description='professors',
            )
            if not professors_state.error:
                professors = [
                    p for p in professors_state.items
                    if p.department_id == pk
                ]
        return {
            'state': state,
            'department': state.data,
            'professors': professors,
        }

    return render_deferred(
        request,
        'departments/department_detail.html',
        'departments/partials/department_detail_content.html',
        loader,
        {'pk': pk},
    )


def _department_form(request, client, pk=None, department=None):
    """
    Shared create/edit handling.

    On success redirects to the detail page of the saved department
    (or the list when the API returns no identifier).
    """
    is_edit = pk is not None

    if request.method == 'POST':
        form = DepartmentForm(request.POST)
        if form.is_valid():
            entity = form.to_department(pk)
            try:
                if is_edit:
                    saved = client.departments.update(pk, entity)
                else:
                    saved = client.departments.create(entity)
            except ApiError as e:
                logger.error(f'Error saving department: {e}')
                form.add_api_error(e, 'Failed to save department. Please try again.')
            else:
                verb = 'updated' if is_edit else 'created'
                get_notifier().success(
                    request,
                    f'Department "{saved.name}" ({saved.code}) {verb} successfully.'
                )
                if saved.id is None:
                    return redirect('departments:department_list')
                return redirect('departments:department_detail', pk=saved.id)
    elif department is not None:
        form = DepartmentForm.from_department(department)
    else:
        form = DepartmentForm()

    return render(request, 'departments/department_form.html', {
        'form': form,
        'is_edit': is_edit,
        'department': department,
        'pk': pk,
        'title': f'Edit Department: {department.name}' if department else 'Create Department',
    })


@require_http_methods(['GET', 'POST'])
def department_create_view(request):
    """
    Create a new department.
    """
    return _department_form(request, get_client())


@require_http_methods(['GET', 'POST'])
def department_edit_view(request, pk):
    """
    Edit an existing department. The department is fetched first to
    pre-populate the form.
    """
    client = get_client()
    state = load(
        lambda: client.departments.get_one(pk),
        'Failed to fetch department details.',
        description=f'department {pk}',
    )
    if state.error:
        return render(request, 'departments/department_form.html', {
            'state': state,
            'is_edit': True,
            'pk': pk,
            'title': 'Edit Department',
        })
    return _department_form(request, client, pk=pk, department=state.data)


@require_http_methods(['GET', 'POST'])
def department_delete_view(request, pk):
    """
    GET: confirmation page. POST: delete, then show the re-fetched list.

    HTMX posts from the list get the refreshed table partial directly.
    """
    client = get_client()

    if request.method == 'GET':
        state = load(
            lambda: client.departments.get_one(pk),
            'Failed to fetch department details.',
            description=f'department {pk}',
        )
        return render(request, 'core/confirm_delete.html', {
            'state': state,
            'object': state.data,
            'label': 'department',
            'warning': 'Departments with professors assigned cannot be deleted.',
            'cancel_url_name': 'departments:department_list',
        })

    delete_entity(
        request,
        client.departments,
        pk,
        get_notifier(),
        label='department',
        conflict_hint=CONFLICT_HINT,
    )

    if request.htmx:
        return render(
            request,
            'departments/partials/department_table.html',
            _department_table_context(request, client),
        )
    return redirect('departments:department_list')
