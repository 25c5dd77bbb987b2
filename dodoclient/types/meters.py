"""Usage meters.

A meter filter is a tree: each clause is either a leaf condition on one
event-metadata key or a nested filter with its own conjunction. Clauses are
decoded first-match, leaf conditions before nested filters.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Union

from dodoclient._serialization import BaseModel, BaseParams, FirstMatch, OpenEnum

__all__ = [
    'AggregationType',
    'Conjunction',
    'DirectFilterCondition',
    'FilterOperator',
    'Meter',
    'MeterAggregation',
    'MeterClause',
    'MeterCreateParams',
    'MeterFilter',
    'MeterListParams',
    'NestedMeterFilter',
]


class AggregationType(str, Enum):
    COUNT = 'count'
    SUM = 'sum'
    MAX = 'max'
    LAST = 'last'


class Conjunction(str, Enum):
    AND = 'and'
    OR = 'or'


class FilterOperator(str, Enum):
    EQUALS = 'equals'
    NOT_EQUALS = 'not_equals'
    GREATER_THAN = 'greater_than'
    GREATER_THAN_OR_EQUALS = 'greater_than_or_equals'
    LESS_THAN = 'less_than'
    LESS_THAN_OR_EQUALS = 'less_than_or_equals'
    CONTAINS = 'contains'
    DOES_NOT_CONTAIN = 'does_not_contain'


class MeterAggregation(BaseModel):
    type: OpenEnum[AggregationType]
    key: str | None = None


class DirectFilterCondition(BaseModel):
    key: str
    operator: OpenEnum[FilterOperator]
    value: Union[str, bool, int, float]


class NestedMeterFilter(BaseModel):
    clauses: list['MeterClause']
    conjunction: OpenEnum[Conjunction]


MeterClause = Annotated[Union[DirectFilterCondition, NestedMeterFilter], FirstMatch]


class MeterFilter(BaseModel):
    clauses: list[MeterClause]
    conjunction: OpenEnum[Conjunction]


NestedMeterFilter.model_rebuild()


class Meter(BaseModel):
    id: str
    aggregation: MeterAggregation
    business_id: str
    created_at: datetime
    event_name: str
    measurement_unit: str
    name: str
    updated_at: datetime
    description: str | None = None
    filter: MeterFilter | None = None


class MeterCreateParams(BaseParams):
    aggregation: MeterAggregation
    event_name: str
    measurement_unit: str
    name: str
    description: str | None = None
    filter: MeterFilter | None = None


class MeterListParams(BaseParams):
    archived: bool | None = None
    page_number: int | None = None
    page_size: int | None = None
