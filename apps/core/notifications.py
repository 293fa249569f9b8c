"""
User notifications for view outcomes.

Views never talk to the messages framework directly; they ask
get_notifier() for the configured Notifier (DIRECTORY_NOTIFIER setting),
so tests and alternative front ends can swap the delivery channel.
"""

from django.conf import settings
from django.contrib import messages
from django.utils.module_loading import import_string


class Notifier:
    """Base notifier. Subclasses deliver success and error notices."""

    def success(self, request, message):
        raise NotImplementedError

    def error(self, request, message):
        raise NotImplementedError


class MessagesNotifier(Notifier):
    """Deliver notices through django.contrib.messages."""

    def success(self, request, message):
        messages.success(request, message)

    def error(self, request, message):
        messages.error(request, message)


def get_notifier():
    """Instantiate the notifier class named by settings.DIRECTORY_NOTIFIER."""
    notifier_class = import_string(settings.DIRECTORY_NOTIFIER)
    return notifier_class()
