"""
Pytest configuration and fixtures for feature-sources tests

Provides representative wire messages for every supported source type.
"""
import pytest

from feature_sources.core.models import (
    BigQueryOptions,
    DataSourceSpec,
    FileOptions,
    KafkaOptions,
    KinesisOptions,
)


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# SPEC FIXTURES
# =======================

@pytest.fixture
def kafka_spec() -> DataSourceSpec:
    """Kafka topic source with a field mapping and timestamp column"""
    return DataSourceSpec(
        type="STREAM_KAFKA",
        kafka_options=KafkaOptions(
            bootstrap_servers="broker:9092",
            class_path="org.ex.Deserializer",
            topic="clicks",
        ),
        field_mapping={"user_id": "user", "ts": "event_time"},
        timestamp_column="ts",
    )


def _all_specs() -> dict[str, DataSourceSpec]:
    return {
        "file": DataSourceSpec(
            type="BATCH_FILE",
            file_options=FileOptions(file_url="gs://bucket/drivers/", file_format="parquet"),
            field_mapping={"driver": "driver_id"},
            timestamp_column="event_ts",
            date_partition_column="day",
        ),
        "bigquery": DataSourceSpec(
            type="BATCH_BIGQUERY",
            bigquery_options=BigQueryOptions(table_ref="project:dataset.table"),
            timestamp_column="created",
        ),
        "kafka": DataSourceSpec(
            type="STREAM_KAFKA",
            kafka_options=KafkaOptions(
                bootstrap_servers="broker:9092",
                class_path="org.ex.Deserializer",
                topic="clicks",
            ),
            field_mapping={"user_id": "user", "ts": "event_time"},
            timestamp_column="ts",
        ),
        "kinesis": DataSourceSpec(
            type="STREAM_KINESIS",
            kinesis_options=KinesisOptions(
                class_path="org.ex.Deserializer",
                region="us-east-1",
                stream_name="rides",
            ),
            field_mapping={"rider": "rider_id", "ts": "event_time"},
        ),
    }


@pytest.fixture(params=sorted(_all_specs()))
def any_spec(request) -> DataSourceSpec:
    """One fully populated spec per supported source type"""
    return _all_specs()[request.param]


@pytest.fixture
def sources_yaml(tmp_path):
    """YAML file defining several data sources"""
    path = tmp_path / "sources.yaml"
    path.write_text(
        """
sources:
  clicks:
    type: STREAM_KAFKA
    kafka_options:
      bootstrap_servers: broker:9092
      class_path: org.ex.Deserializer
      topic: clicks
    field_mapping:
      user_id: user
      ts: event_time
    timestamp_column: ts

  clicks_reordered:
    type: STREAM_KAFKA
    kafka_options:
      topic: clicks
      class_path: org.ex.Deserializer
      bootstrap_servers: broker:9092
    field_mapping:
      ts: event_time
      user_id: user
    timestamp_column: ts

  drivers:
    type: BATCH_FILE
    file_options:
      file_url: gs://bucket/drivers/
      file_format: parquet
    date_partition_column: day
"""
    )
    return path
