"""Boundary validation of caller-supplied option mappings."""

from typing import Any, Mapping, Type, TypeVar, Union

import pydantic

from seo_tools.errors import ConfigurationError

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def _describe(exc: pydantic.ValidationError) -> str:
    unknown = []
    invalid = []
    for err in exc.errors():
        key = ".".join(str(part) for part in err["loc"]) or "<root>"
        if err["type"] == "extra_forbidden":
            unknown.append(key)
        else:
            invalid.append(f"{key} ({err['msg']})")
    parts = []
    if unknown:
        parts.append("unknown option(s): " + ", ".join(unknown))
    if invalid:
        parts.append("invalid option(s): " + ", ".join(invalid))
    return "; ".join(parts)


def parse_options(
    model: Type[ModelT],
    value: Union[ModelT, Mapping[str, Any], None],
    context: str,
) -> ModelT:
    """Return *value* as an instance of *model*.

    Model instances are returned as-is; mappings (or ``None`` for "all
    defaults") are validated.

    Raises:
        ConfigurationError: when the mapping carries unknown keys or values of
            the wrong type.
    """
    if isinstance(value, model):
        return value
    data = {} if value is None else value
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ConfigurationError(f"{context}: {_describe(exc)}") from exc
