"""
DataSource model: the persisted descriptor of where feature values come from.

A DataSource is built from a wire message (DataSourceSpec) or rehydrated
from a storage row (DataSourceRow), and converts back to either form.
Equality and hashing are defined over the wire form, so blob formatting
in storage never makes two equivalent sources compare unequal.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from feature_sources.core.codec import deserialize, serialize
from feature_sources.core.config import strict_options_enabled
from feature_sources.core.errors import DataSourceError, MalformedBlobError
from feature_sources.observability.logger import get_logger
from feature_sources.observability.metrics import record_codec_error, record_conversion

from .data_source_spec import DataSourceSpec, options_for
from .source_type import SourceType

logger = get_logger(__name__)


class DataSourceRow(BaseModel):
    """
    Flat storage shape of a DataSource, one column per attribute.

    Attributes:
        id: Surrogate key assigned by storage (None until persisted)
        type: SourceType member name
        config: Serialized variant options
        field_mapping: Serialized field mapping
        timestamp_column: Event timestamp column
        date_partition_column: Date partition column
    """

    id: int | None = None
    type: str
    config: str | None = None
    field_mapping: str | None = None
    timestamp_column: str | None = None
    date_partition_column: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 7,
                "type": "STREAM_KAFKA",
                "config": '{"bootstrap_servers":"broker:9092","class_path":"org.ex.Deserializer","topic":"clicks"}',
                "field_mapping": '{"ts":"event_time","user_id":"user"}',
                "timestamp_column": "ts",
                "date_partition_column": "",
            }
        }
    )


class DataSource(BaseModel):
    """
    Descriptor of a single data source.

    Attributes:
        id: Surrogate key assigned by storage (None until persisted)
        type: Source variant
        options: Flattened variant options
        field_mapping: Source field name -> feature field name
        timestamp_column: Event timestamp column ("" when unset)
        date_partition_column: Date partition column ("" when unset)
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    type: SourceType
    options: dict[str, str] = Field(default_factory=dict)
    field_mapping: dict[str, str] = Field(default_factory=dict)
    timestamp_column: str = ""
    date_partition_column: str = ""

    @classmethod
    def from_spec(cls, spec: DataSourceSpec) -> "DataSource":
        """
        Construct a DataSource from its wire representation.

        Args:
            spec: Wire message to convert

        Returns:
            A new, unpersisted DataSource

        Raises:
            UnsupportedSourceTypeError: If spec.type is not a supported variant
        """
        try:
            options = spec.options().flatten()
        except DataSourceError as e:
            record_conversion("from_spec", spec.type.value, success=False)
            logger.warning(
                f"Cannot convert data source spec: {e}",
                extra={"direction": "from_spec", "source_type": spec.type.value},
            )
            raise

        source = cls(
            type=spec.type,
            options=options,
            field_mapping=dict(spec.field_mapping),
            timestamp_column=spec.timestamp_column,
            date_partition_column=spec.date_partition_column,
        )
        record_conversion("from_spec", spec.type.value)
        logger.debug(
            "Converted data source spec",
            extra={"direction": "from_spec", "source_type": spec.type.value},
        )
        return source

    def to_spec(self, strict: bool | None = None) -> DataSourceSpec:
        """
        Convert this DataSource to its wire representation.

        Options the variant does not define are ignored. Options it defines
        but that are missing become empty strings, unless strict mode is on.

        Args:
            strict: Fail on missing option keys; defaults to the
                FEATURE_SOURCES_STRICT_OPTIONS setting

        Raises:
            UnsupportedSourceTypeError: If type is not a supported variant
            MissingSourceOptionError: In strict mode, if option keys are missing
        """
        if strict is None:
            strict = strict_options_enabled()

        try:
            spec = self._build_spec(strict)
        except DataSourceError as e:
            record_conversion("to_spec", self.type.value, success=False)
            logger.warning(
                f"Cannot convert data source {self.id}: {e}",
                extra={"direction": "to_spec", "source_type": self.type.value},
            )
            raise

        record_conversion("to_spec", self.type.value)
        return spec

    def _build_spec(self, strict: bool) -> DataSourceSpec:
        field_name, options_cls = options_for(self.type)
        block = options_cls.unflatten(self.options, strict=strict, source_type=self.type.value)
        return DataSourceSpec(
            type=self.type,
            field_mapping=dict(self.field_mapping),
            timestamp_column=self.timestamp_column,
            date_partition_column=self.date_partition_column,
            **{field_name: block},
        )

    @classmethod
    def from_row(cls, row: DataSourceRow | dict[str, Any]) -> "DataSource":
        """
        Rehydrate a DataSource from a storage row.

        The options and field mapping blobs are decoded independently.

        Raises:
            UnsupportedSourceTypeError: If the stored type is unknown
            MalformedBlobError: If either blob cannot be parsed
        """
        if isinstance(row, dict):
            row = DataSourceRow.model_validate(row)

        try:
            source_type = SourceType.parse(row.type)
            options = deserialize(row.config, column="config")
            field_mapping = deserialize(row.field_mapping, column="field_mapping")
        except DataSourceError as e:
            if isinstance(e, MalformedBlobError):
                record_codec_error("from_row")
            record_conversion("from_row", row.type, success=False)
            logger.warning(
                f"Cannot load data source row {row.id}: {e}",
                extra={"direction": "from_row", "source_type": row.type},
            )
            raise

        record_conversion("from_row", source_type.value)
        return cls(
            id=row.id,
            type=source_type,
            options=options,
            field_mapping=field_mapping,
            timestamp_column=row.timestamp_column or "",
            date_partition_column=row.date_partition_column or "",
        )

    def to_row(self) -> DataSourceRow:
        """
        Flatten this DataSource into a storage row.

        Raises:
            UnsupportedSourceTypeError: If type is not a supported variant
        """
        # Only the variant's own keys are ever written.
        _, options_cls = options_for(self.type)
        config = {key: self.options[key] for key in options_cls.keys() if key in self.options}

        record_conversion("to_row", self.type.value)
        return DataSourceRow(
            id=self.id,
            type=self.type.value,
            config=serialize(config),
            field_mapping=serialize(self.field_mapping),
            timestamp_column=self.timestamp_column,
            date_partition_column=self.date_partition_column,
        )

    def with_id(self, source_id: int) -> "DataSource":
        """Copy of this DataSource carrying a storage-assigned id."""
        return self.model_copy(update={"id": source_id}, deep=True)

    @property
    def fields_map(self) -> dict[str, str]:
        """Copy of the source-to-feature field mapping."""
        return dict(self.field_mapping)

    def canonical_key(self) -> tuple:
        """
        Hashable canonical form derived from the wire representation.

        Field mapping order and blob formatting do not affect it.
        """
        spec = self._build_spec(strict=False)
        options = spec.options()
        return (
            spec.type.value,
            tuple(options.flatten().items()),
            frozenset(spec.field_mapping.items()),
            spec.timestamp_column,
            spec.date_partition_column,
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DataSource):
            return NotImplemented
        return self._build_spec(strict=False) == other._build_spec(strict=False)

    def __hash__(self) -> int:
        return hash(self.canonical_key())
