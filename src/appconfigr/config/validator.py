"""Readable rendering of typed-validation failures."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one line per failing field.

    Field locations are joined with dots; list indexes appear as numbers
    (``servers.0.port``). Errors at the document root are reported as
    ``<root>``.

    Args:
        exc: Error raised while validating a loaded configuration

    Returns:
        Human-readable messages in the order pydantic reported them

    Example:
        >>> from pydantic import BaseModel, ValidationError
        >>> class Sample(BaseModel):
        ...     port: int
        >>> try:
        ...     Sample(port="abc")
        ... except ValidationError as e:
        ...     flatten_pydantic_errors(e)[0].startswith("Field 'port'")
        True
    """
    messages: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc) if loc else "<root>"
        msg = error.get("msg", "Unknown error")

        if error.get("type") == "missing":
            messages.append(f"Field '{field_path}': {msg}")
        else:
            received = error.get("input")
            messages.append(f"Field '{field_path}': {msg} (received: {received!r})")

    return messages or ["Validation failed with unknown error"]
