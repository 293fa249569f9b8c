"""
Views for professors app.

Includes:
- Professor list view (table loaded by HTMX)
- Professor detail view
- Professor create/edit views
- Professor delete (confirmation page + POST)
"""

import logging

from django.shortcuts import render, redirect
from django.views.decorators.http import require_GET, require_http_methods

from apps.core.api import ApiError, get_client
from apps.core.notifications import get_notifier
from apps.core.services import delete_entity, load
from apps.core.views import render_deferred
from .forms import ProfessorForm

logger = logging.getLogger(__name__)


def _search_professors(professors, search):
    """Filter professors by name or email (case-insensitive)."""
    if not search:
        return professors
    needle = search.lower()
    return [
        p for p in professors
        if needle in p.full_name.lower() or needle in p.email.lower()
    ]


def _professor_table_context(request, client):
    search = request.GET.get('search', '').strip()
    state = load(
        client.professors.get_all,
        'Failed to fetch professors. Please try again.',
        description='professors',
    )
    return {
        'state': state,
        'professors': _search_professors(state.items, search),
        'search': search,
    }


@require_GET
def professor_list_view(request):
    """
    List all professors with their department code.
    """
    client = get_client()
    return render_deferred(
        request,
        'professors/professor_list.html',
        'professors/partials/professor_table.html',
        lambda: _professor_table_context(request, client),
        {'search': request.GET.get('search', '').strip()},
    )


@require_GET
def professor_detail_view(request, pk):
    client = get_client()

    def loader():
        state = load(
            lambda: client.professors.get_one(pk),
            'Failed to fetch professor details.',
            description=f'professor {pk}',
        )
        return {'state': state, 'professor': state.data}

    return render_deferred(
        request,
        'professors/professor_detail.html',
        'professors/partials/professor_detail_content.html',
        loader,
        {'pk': pk},
    )


def _professor_form(request, client, pk=None, professor=None):
    """
    Shared create/edit handling.

    The department choices come from the API; if they cannot be fetched the
    form is still shown with an explanation and an empty select.
    """
    is_edit = pk is not None

    departments_state = load(
        client.departments.get_all,
        'Failed to load departments. Please try again.',
        description='departments',
    )
    departments = departments_state.items

    if request.method == 'POST':
        form = ProfessorForm(request.POST, departments=departments)
        if form.is_valid():
            entity = form.to_professor(pk)
            try:
                if is_edit:
                    saved = client.professors.update(pk, entity)
                else:
                    saved = client.professors.create(entity)
            except ApiError as e:
                logger.error(f'Error saving professor: {e}')
                form.add_api_error(e, 'Failed to save professor. Please try again.')
            else:
                verb = 'updated' if is_edit else 'created'
                get_notifier().success(
                    request,
                    f'Professor "{saved.full_name}" {verb} successfully.'
                )
                if saved.id is None:
                    return redirect('professors:professor_list')
                return redirect('professors:professor_detail', pk=saved.id)
    elif professor is not None:
        form = ProfessorForm.from_professor(professor, departments=departments)
    else:
        form = ProfessorForm(departments=departments)

    return render(request, 'professors/professor_form.html', {
        'form': form,
        'is_edit': is_edit,
        'professor': professor,
        'pk': pk,
        'departments_error': departments_state.error,
        'title': f'Edit Professor: {professor.full_name}' if professor else 'Create Professor',
    })


@require_http_methods(['GET', 'POST'])
def professor_create_view(request):
    return _professor_form(request, get_client())


@require_http_methods(['GET', 'POST'])
def professor_edit_view(request, pk):
    """
    Edit an existing professor, pre-populated from the API.
    """
    client = get_client()
    state = load(
        lambda: client.professors.get_one(pk),
        'Failed to fetch professor details.',
        description=f'professor {pk}',
    )
    if state.error:
        return render(request, 'professors/professor_form.html', {
            'state': state,
            'is_edit': True,
            'pk': pk,
            'title': 'Edit Professor',
        })
    return _professor_form(request, client, pk=pk, professor=state.data)


@require_http_methods(['GET', 'POST'])
def professor_delete_view(request, pk):
    """
    GET: confirmation page. POST: delete, then show the re-fetched list.
    """
    client = get_client()

    if request.method == 'GET':
        state = load(
            lambda: client.professors.get_one(pk),
            'Failed to fetch professor details.',
            description=f'professor {pk}',
        )
        return render(request, 'core/confirm_delete.html', {
            'state': state,
            'object': state.data,
            'label': 'professor',
            'cancel_url_name': 'professors:professor_list',
        })

    delete_entity(request, client.professors, pk, get_notifier(), label='professor')

    if request.htmx:
        return render(
            request,
            'professors/partials/professor_table.html',
            _professor_table_context(request, client),
        )
    return redirect('professors:professor_list')
