"""
Data source configuration loading.

Loads wire-format data source definitions from YAML files.
"""

from pathlib import Path
from typing import Any

import yaml

from feature_sources.core.models import DataSourceSpec


class DataSourceConfigLoader:
    """
    Loads data source specs from YAML configuration files.

    Expected YAML format:
    ```yaml
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

      driver_stats:
        type: BATCH_FILE
        file_options:
          file_url: gs://bucket/driver_stats/
          file_format: parquet
        date_partition_column: day
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Data source configuration file not found: {config_path}")

    def load_sources(self) -> dict[str, DataSourceSpec]:
        """
        Load and parse all data sources in the file.

        Returns:
            Source name -> DataSourceSpec, in file order

        Raises:
            ValueError: If the YAML is missing the sources section or an entry is not a mapping
            pydantic.ValidationError: If an entry is not a valid spec
            UnsupportedSourceTypeError: If an entry names an unknown type
        """
        with open(self.config_path) as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict) or "sources" not in config:
            raise ValueError("Configuration file must contain 'sources' section")

        sources = config["sources"] or {}
        if not isinstance(sources, dict):
            raise ValueError("'sources' must be a mapping of source name to definition")

        return {
            str(name): self._parse_source(str(name), definition)
            for name, definition in sources.items()
        }

    def load_source(self, name: str) -> DataSourceSpec:
        """
        Load a single named data source.

        Raises:
            KeyError: If no source with that name is defined
        """
        sources = self.load_sources()
        if name not in sources:
            raise KeyError(f"Data source '{name}' not defined in {self.config_path}")
        return sources[name]

    def _parse_source(self, name: str, definition: Any) -> DataSourceSpec:
        if not isinstance(definition, dict):
            raise ValueError(f"Definition for data source '{name}' must be a mapping")
        if "type" not in definition:
            raise ValueError(f"Data source '{name}' is missing 'type'")

        # YAML may read numeric-looking values as numbers; wire fields are strings
        return DataSourceSpec.model_validate(_stringify(definition))


_STRING_BLOCKS = {"file_options", "bigquery_options", "kafka_options", "kinesis_options", "field_mapping"}


def _stringify(definition: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in definition.items():
        if key in _STRING_BLOCKS and value is None:
            # null mapping is empty; a null options block is left unset
            if key == "field_mapping":
                result[key] = {}
            continue
        if key in _STRING_BLOCKS and isinstance(value, dict):
            result[key] = {str(k): "" if v is None else str(v) for k, v in value.items()}
        else:
            result[key] = value
    return result
