"""
Unit tests for source types and variant option blocks.
"""

import pytest
from pydantic import ValidationError

from feature_sources.core.errors import MissingSourceOptionError, UnsupportedSourceTypeError
from feature_sources.core.models import (
    SOURCE_OPTIONS,
    BigQueryOptions,
    FileOptions,
    KafkaOptions,
    KinesisOptions,
    SourceType,
    options_for,
)


class TestSourceType:
    """Tests for SourceType"""

    def test_supported_excludes_invalid(self):
        """Test INVALID is not a supported variant"""
        assert SourceType.INVALID not in SourceType.supported()
        assert len(SourceType.supported()) == 4

    @pytest.mark.parametrize("name", ["BATCH_FILE", "BATCH_BIGQUERY", "STREAM_KAFKA", "STREAM_KINESIS"])
    def test_parse_by_name(self, name):
        """Test member names resolve to members"""
        assert SourceType.parse(name) is SourceType[name]

    @pytest.mark.parametrize("value", ["INVALID", SourceType.INVALID, "", "batch_file", "STREAM_PUBSUB", 3, None])
    def test_parse_rejects_unsupported(self, value):
        """Test unsupported values raise UnsupportedSourceTypeError"""
        with pytest.raises(UnsupportedSourceTypeError):
            SourceType.parse(value)


class TestSourceOptionsRegistry:
    """Tests for the variant registry"""

    def test_every_supported_type_has_a_block(self):
        """Test the registry covers exactly the supported types"""
        assert set(SOURCE_OPTIONS) == SourceType.supported()

    def test_options_for(self):
        """Test lookup by member and by name"""
        assert options_for(SourceType.STREAM_KINESIS) == ("kinesis_options", KinesisOptions)
        assert options_for("BATCH_BIGQUERY") == ("bigquery_options", BigQueryOptions)

    def test_options_for_invalid(self):
        """Test lookup of INVALID fails"""
        with pytest.raises(UnsupportedSourceTypeError):
            options_for(SourceType.INVALID)


class TestSourceOptions:
    """Tests for flatten/unflatten"""

    def test_keys_follow_schema(self):
        """Test each block exposes its fixed key set"""
        assert FileOptions.keys() == ("file_url", "file_format")
        assert BigQueryOptions.keys() == ("table_ref",)
        assert KafkaOptions.keys() == ("bootstrap_servers", "class_path", "topic")
        assert KinesisOptions.keys() == ("class_path", "region", "stream_name")

    def test_flatten(self):
        """Test flatten writes exactly the block's fields"""
        options = KafkaOptions(bootstrap_servers="broker:9092", class_path="x.Y", topic="clicks")
        assert options.flatten() == {
            "bootstrap_servers": "broker:9092",
            "class_path": "x.Y",
            "topic": "clicks",
        }

    def test_unflatten_ignores_extraneous_keys(self):
        """Test keys outside the schema are dropped"""
        options = FileOptions.unflatten({"file_url": "s3://b/", "file_format": "csv", "topic": "x"})
        assert options == FileOptions(file_url="s3://b/", file_format="csv")

    def test_unflatten_defaults_missing_keys(self):
        """Test missing keys become empty strings in tolerant mode"""
        options = KinesisOptions.unflatten({"region": "eu-west-1"})
        assert options == KinesisOptions(class_path="", region="eu-west-1", stream_name="")

    def test_unflatten_strict_reports_missing_keys(self):
        """Test strict mode names every missing key"""
        with pytest.raises(MissingSourceOptionError) as exc_info:
            KinesisOptions.unflatten({"region": "eu-west-1"}, strict=True, source_type="STREAM_KINESIS")
        assert exc_info.value.missing == ["class_path", "stream_name"]
        assert exc_info.value.source_type == "STREAM_KINESIS"

    def test_unflatten_strict_accepts_complete_map(self):
        """Test strict mode passes when every key is present"""
        options = BigQueryOptions.unflatten({"table_ref": "p:d.t"}, strict=True)
        assert options.table_ref == "p:d.t"

    def test_blocks_are_immutable(self):
        """Test option blocks cannot be mutated"""
        options = FileOptions(file_url="a", file_format="b")
        with pytest.raises(ValidationError):
            options.file_url = "c"

    def test_unknown_field_rejected(self):
        """Test blocks reject fields of other variants"""
        with pytest.raises(ValidationError):
            FileOptions(file_url="a", topic="clicks")
