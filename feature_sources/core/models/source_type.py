"""
SourceType enum: the closed set of data source variants.
"""

from enum import Enum

from feature_sources.core.errors import UnsupportedSourceTypeError


class SourceType(str, Enum):
    """
    Kind of data source. Stored and exchanged by member name.

    INVALID is the unset wire value and is never a supported variant.
    """

    INVALID = "INVALID"
    BATCH_FILE = "BATCH_FILE"
    BATCH_BIGQUERY = "BATCH_BIGQUERY"
    STREAM_KAFKA = "STREAM_KAFKA"
    STREAM_KINESIS = "STREAM_KINESIS"

    @classmethod
    def supported(cls) -> frozenset["SourceType"]:
        return frozenset(member for member in cls if member is not cls.INVALID)

    @classmethod
    def parse(cls, value: "SourceType | str") -> "SourceType":
        """
        Resolve a member or member name to a supported SourceType.

        Raises:
            UnsupportedSourceTypeError: For INVALID or any unknown value
        """
        if isinstance(value, cls):
            member = value
        elif isinstance(value, str) and value in cls.__members__:
            member = cls[value]
        else:
            raise UnsupportedSourceTypeError(value)

        if member is cls.INVALID:
            raise UnsupportedSourceTypeError(member.value)
        return member
