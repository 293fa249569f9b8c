"""
Service layer shared by the department and professor views.

Services:
- load: Run an API fetch and capture the result as a FetchState
- delete_entity: Delete through the API and notify the outcome
- delete_failure_message: User-facing text for a rejected delete
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .api import ApiError

logger = logging.getLogger(__name__)


class CancellationToken:
    """
    Marks a pending fetch as no longer wanted.

    A fetch whose token is cancelled before it returns has its result
    discarded by load().
    """

    def __init__(self):
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    @property
    def cancelled(self):
        return self._cancelled


@dataclass
class FetchState:
    """
    Render state for a view backed by one fetch.

    loading stays True until a result (data or error) is accepted.
    """

    data: Any = None
    loading: bool = True
    error: Optional[str] = None

    @property
    def items(self):
        """The fetched sequence for list views; empty until loaded."""
        return self.data if self.data is not None else []


def load(fetch, error_message, description='data', token=None):
    """
    Call fetch() and return the resulting FetchState.

    Args:
        fetch: Zero-argument callable performing the API call
        error_message: Text shown to the user if the call fails
        description: What is being fetched, for the log
        token: Optional CancellationToken; a cancelled token discards the result.
            Views do not pass one: each HTMX partial is its own request and
            the page aborts superseded ones with hx-sync. The token is for
            callers that can abandon a fetch mid-flight.

    Returns:
        FetchState with data on success, error on failure, or still loading
        if the token was cancelled
    """
    state = FetchState()

    try:
        data = fetch()
    except ApiError as e:
        logger.error(f'Error fetching {description}: {e}')
        if token is not None and token.cancelled:
            return state
        state.error = error_message
        state.loading = False
        return state

    if token is not None and token.cancelled:
        logger.debug(f'Discarding {description}: fetch was cancelled')
        return state

    state.data = data
    state.loading = False
    return state


def delete_failure_message(error, label, conflict_hint=None):
    """
    Build the message shown when the API rejects a delete.

    Conflicts (HTTP 409 or a constraint error code) use conflict_hint.
    Otherwise the server's message is preferred over the generic text.
    """
    if error.is_conflict and conflict_hint:
        return f'Failed to delete {label}. {conflict_hint}'
    if error.message and error.status_code and error.status_code < 500:
        return f'Failed to delete {label}. {error.message}'
    return f'Failed to delete {label}. Please try again.'


def delete_entity(request, resource, pk, notifier, label, conflict_hint=None):
    """
    Delete one entity and report the outcome through the notifier.

    Args:
        request: Current HttpRequest (for the notifier)
        resource: ResourceClient for the entity type
        pk: Identifier to delete
        notifier: Notifier instance
        label: Human name of the entity type ('department')
        conflict_hint: Extra text when the delete is refused due to related records

    Returns:
        True if the API accepted the delete
    """
    try:
        resource.delete(pk)
    except ApiError as e:
        logger.error(f'Error deleting {label} {pk}: {e}')
        notifier.error(request, delete_failure_message(e, label, conflict_hint))
        return False

    logger.info(f'Deleted {label} {pk}')
    notifier.success(request, f'{label.capitalize()} deleted successfully.')
    return True
