"""
Shared form helpers.

Includes:
- ApiFormMixin: map API validation errors back onto form fields
- INPUT_CLASS: Tailwind classes used by every text input
"""

INPUT_CLASS = (
    'mt-1 block w-full px-3 py-2 border border-gray-300 rounded-md shadow-sm '
    'focus:outline-none focus:ring-indigo-500 focus:border-indigo-500 sm:text-sm'
)


class ApiFormMixin:
    """
    For forms whose data is saved through the directory API.

    Subclasses set api_field_map: {'apiFieldName': 'form_field_name'}.
    """

    api_field_map = {}

    def add_api_error(self, error, fallback_message):
        """
        Attach an ApiError to the form.

        Field errors the API reports for known fields go on those fields,
        everything else becomes a non-field error.
        """
        unmapped = False
        for api_field, message in error.errors.items():
            field = self.api_field_map.get(api_field)
            if field in self.fields:
                self.add_error(field, str(message))
            else:
                unmapped = True

        if unmapped or not error.errors:
            if error.message and error.status_code and error.status_code < 500:
                self.add_error(None, error.message)
            else:
                self.add_error(None, fallback_message)
