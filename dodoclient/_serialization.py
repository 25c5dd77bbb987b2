"""Conversion between typed models and wire payloads.

The API speaks snake_case JSON. Models are pydantic classes whose field
declarations double as the mapping table: the attribute name, the wire alias
(only where the two differ), whether the field is required, and how it is
decoded. Request payloads are produced with ``exclude_unset`` so a field the
caller never set is left out while an explicit ``None`` is sent as ``null``.
"""

import re
from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict, Field, RootModel, TypeAdapter, ValidationError

from dodoclient._types import NotGiven
from dodoclient.exceptions import APIResponseValidationError, InvalidParametersError

__all__ = [
    'BaseModel',
    'BaseParams',
    'FirstMatch',
    'OpenEnum',
    'coerce',
    'format_path',
    'strip_not_given',
    'to_wire',
    'transform_keys',
]

E = TypeVar('E', bound=Enum)
T = TypeVar('T')

_PLACEHOLDER = re.compile(r'%(\d+)\$s')

# Known members decode to the enum, anything else stays a plain string so
# values added server-side do not break older clients.
OpenEnum = Annotated[Union[E, str], Field(union_mode='left_to_right')]

# Variants are tried in declaration order and the first valid one wins.
FirstMatch = Field(union_mode='left_to_right')


class BaseModel(PydanticBaseModel):
    """Base class for every request and response model."""

    model_config = ConfigDict(
        extra='allow',
        populate_by_name=True,
        protected_namespaces=(),
    )

    def with_changes(self, **changes: Any) -> 'BaseModel':
        """Return a validated copy with ``changes`` applied.

        Fields set on the original stay set on the copy, so omitted fields
        remain omitted when the copy is serialized.
        """
        data = self.model_dump(by_alias=False, exclude_unset=True)
        data.update(changes)
        return type(self).model_validate(data)

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON payload the API expects."""
        return self.model_dump(mode='json', by_alias=True, exclude_unset=True)


class BaseParams(BaseModel):
    """Base class for request parameter models.

    Unknown keys are rejected so a misspelled argument fails before anything
    is sent. Use ``RequestOptions.extra_query`` or ``extra_body`` to pass a
    parameter this client does not model yet.
    """

    model_config = ConfigDict(
        extra='forbid',
        populate_by_name=True,
        protected_namespaces=(),
    )


def transform_keys(data: Mapping[str, Any], mapping: Mapping[str, str]) -> dict:
    """Rename keys according to ``mapping``; unmapped keys pass through.

    Examples:
        >>> transform_keys({'webhook_id': 'a', 'x': 1}, {'webhook_id': 'webhook-id'})
        {'webhook-id': 'a', 'x': 1}
    """
    return {mapping.get(key, key): value for key, value in data.items()}


def strip_not_given(data: Mapping[str, Any]) -> dict[str, Any]:
    """Drop ``NOT_GIVEN`` entries and keep explicit ``None`` values."""
    return {key: value for key, value in data.items() if not isinstance(value, NotGiven)}


def to_wire(
    params: PydanticBaseModel | Mapping[str, Any] | None,
    model: type[PydanticBaseModel] | None = None,
) -> dict[str, Any] | None:
    """Turn a parameter bag into a JSON-ready dict.

    Args:
        params: A params model, a plain mapping, or ``None``.
        model: The params model the mapping must conform to. When given, a
            mapping is validated through it first so enums, dates and nested
            models are encoded exactly like a typed call.

    Returns:
        The wire payload, or ``None`` when no params were passed.

    Raises:
        InvalidParametersError: If the mapping does not fit ``model``.
    """
    if params is None:
        return None
    if isinstance(params, PydanticBaseModel):
        return params.model_dump(mode='json', by_alias=True, exclude_unset=True)

    data = strip_not_given(params)
    if model is None:
        return TypeAdapter(dict[str, Any]).dump_python(data, mode='json')
    try:
        validated = model.model_validate(data)
    except ValidationError as e:
        raise InvalidParametersError(model.__name__, cause=e) from e
    return validated.model_dump(mode='json', by_alias=True, exclude_unset=True)


def coerce(type_: Any, data: Any, *, response: Any = None) -> Any:
    """Validate decoded JSON into ``type_``.

    Raises:
        APIResponseValidationError: If ``data`` does not match ``type_``.
    """
    try:
        validated = TypeAdapter(type_).validate_python(data)
    except ValidationError as e:
        type_name = getattr(type_, '__name__', repr(type_))
        raise APIResponseValidationError(
            type_name, body=data, response=response, cause=e
        ) from e
    if isinstance(validated, RootModel):
        return validated.root
    return validated


def format_path(template: str, *segments: Any) -> str:
    """Fill ``%N$s`` placeholders with escaped path segments.

    Examples:
        >>> format_path('customers/%1$s/wallets', 'cus 1/2')
        'customers/cus%201%2F2/wallets'
    """

    def substitute(match: re.Match) -> str:
        index = int(match.group(1)) - 1
        if index >= len(segments):
            raise InvalidParametersError(
                template, cause=ValueError(f'missing path parameter {index + 1}')
            )
        return quote(str(segments[index]), safe='')

    return _PLACEHOLDER.sub(substitute, template)
