"""Base class for resource groups."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel as PydanticBaseModel

from dodoclient._serialization import strip_not_given, to_wire

if TYPE_CHECKING:
    from dodoclient._base_client import BaseClient

__all__ = ['APIResource', 'Params']

# A params model, a plain mapping, or nothing.
Params = PydanticBaseModel | Mapping[str, Any] | None


class APIResource:
    """One resource group bound to a client.

    Every endpoint method takes its parameters either as the typed params
    model, as a mapping, or as keyword arguments. Keyword arguments are
    applied on top of a positional params object; a keyword left at
    ``NOT_GIVEN`` is not sent.
    """

    def __init__(self, client: 'BaseClient') -> None:
        self._client = client

    def _payload(
        self,
        model: type[PydanticBaseModel],
        params: Params,
        fields: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        fields = strip_not_given(fields)
        if not fields:
            return to_wire(params, model)
        if isinstance(params, PydanticBaseModel):
            params = params.model_dump(exclude_unset=True)
        return to_wire({**(params or {}), **fields}, model)
