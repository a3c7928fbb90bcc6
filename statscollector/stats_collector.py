# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.

import numbers
from decimal import Decimal
from typing import Mapping, NamedTuple, Union

FieldValue = Union[bool, int, float, Decimal, str]


def is_field_value(value):
    """True when value is a bool, a real number, a Decimal or a string."""
    return isinstance(value, (bool, numbers.Real, Decimal, str))


def invalid_fields(fields):
    """Return the keys of `fields` whose values cannot be written as fields."""
    return [key for key, value in fields.items() if not is_field_value(value)]


class Point(NamedTuple):
    """A single timestamped measurement.

    The mappings are kept as given, so a point hands its tags and fields to
    the backend without copying, renaming or filtering them.
    """

    namespace: str
    tags: Mapping[str, str]
    fields: Mapping[str, FieldValue]
    timestamp: object

    def to_dict(self):
        """Shape the point the way `influxdb_client.Point.from_dict` reads it."""
        return {
            "measurement": self.namespace,
            "tags": self.tags,
            "fields": self.fields,
            "time": self.timestamp,
        }


class StatsCollector:
    """Records time series points.

    Implementations own whatever connection they write through and release
    it in `close`. Using a collector after `close` is undefined.
    """

    def store_point(self, namespace, tags, fields, timestamp):
        raise NotImplementedError()

    def close(self):
        raise NotImplementedError()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
