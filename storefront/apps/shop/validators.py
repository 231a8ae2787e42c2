from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator

validate_module_name = RegexValidator(
    regex=r"\A[a-zA-Z0-9_-]+\Z",
    message="Module names may only contain letters, digits, underscores and dashes",
)


def is_valid_module_name(name) -> bool:
    """Whether ``name`` is a well-formed module name (e.g. ``gsitemap``)."""
    if not isinstance(name, str):
        return False
    try:
        validate_module_name(name)
    except ValidationError:
        return False
    return True
