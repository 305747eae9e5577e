"""
Data source models.

All models use Pydantic for runtime validation and type safety.
"""

from .data_source import DataSource, DataSourceRow
from .data_source_spec import SOURCE_OPTIONS, DataSourceSpec, options_for
from .source_options import (
    BigQueryOptions,
    FileOptions,
    KafkaOptions,
    KinesisOptions,
    SourceOptions,
)
from .source_type import SourceType

__all__ = [
    "DataSource",
    "DataSourceRow",
    "DataSourceSpec",
    "SOURCE_OPTIONS",
    "options_for",
    "SourceType",
    "SourceOptions",
    "FileOptions",
    "BigQueryOptions",
    "KafkaOptions",
    "KinesisOptions",
]
