"""
Text blob codec for flattened string mappings.
"""

from .flat_map import EMPTY_BLOB, deserialize, serialize

__all__ = ["EMPTY_BLOB", "serialize", "deserialize"]
