"""
Variant-specific option blocks.

Each block knows how to flatten itself into the generic string map that is
stored, and how to rebuild itself from that map. Both directions only touch
the block's own fields: extraneous keys are never written and are ignored
on the way back.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from feature_sources.core.errors import MissingSourceOptionError


class SourceOptions(BaseModel):
    """Base class for option blocks. Every field is a string."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)

    def flatten(self) -> dict[str, str]:
        """Flatten this block into its stored key/value form."""
        return {key: getattr(self, key) for key in self.keys()}

    @classmethod
    def unflatten(
        cls,
        flat: Mapping[str, str],
        strict: bool = False,
        source_type: object = None,
    ) -> "SourceOptions":
        """
        Rebuild a block from flattened options.

        Missing keys become empty strings unless strict is set.

        Args:
            flat: Flattened options map
            strict: Raise instead of defaulting missing keys
            source_type: Source type reported in strict-mode errors

        Raises:
            MissingSourceOptionError: In strict mode, if any key is missing
        """
        missing = [key for key in cls.keys() if key not in flat]
        if strict and missing:
            raise MissingSourceOptionError(source_type or cls.__name__, missing)
        return cls(**{key: flat.get(key, "") for key in cls.keys()})


class FileOptions(SourceOptions):
    """Batch file source, e.g. parquet files under a bucket prefix."""

    file_url: str = ""
    file_format: str = ""


class BigQueryOptions(SourceOptions):
    """Batch warehouse table source."""

    table_ref: str = ""


class KafkaOptions(SourceOptions):
    """Kafka topic stream source."""

    bootstrap_servers: str = ""
    class_path: str = ""
    topic: str = ""


class KinesisOptions(SourceOptions):
    """Kinesis stream source."""

    class_path: str = ""
    region: str = ""
    stream_name: str = ""
