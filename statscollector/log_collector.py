# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.

import logging
import time
from datetime import datetime, timezone

import ujson as json

from statscollector.stats_collector import StatsCollector

logger = logging.getLogger(__name__)

_UNITS_PER_SECOND = {"ns": 1_000_000_000, "us": 1_000_000, "ms": 1_000, "s": 1}


def _epoch_seconds(timestamp, write_precision="ns"):
    if timestamp is None:
        return int(time.time())
    if isinstance(timestamp, datetime):
        # naive datetimes are UTC, as in influxdb_client
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return int(timestamp.timestamp())
    return int(timestamp) // _UNITS_PER_SECOND[write_precision]


class LogCollector(StatsCollector):
    """
    Writes each point to standard output as one JSON line, for a log
    forwarder to pick up and ship.

    Integer timestamps are read in `write_precision` and printed as epoch
    seconds.
    """

    def __init__(self, write_precision="ns"):
        self.write_precision = write_precision

    def store_point(self, namespace, tags, fields, timestamp):
        logger.debug("Sending point %s to standard output", namespace)
        print(
            json.dumps(
                {
                    "m": namespace,
                    "t": tags,
                    "f": fields,
                    "e": _epoch_seconds(timestamp, self.write_precision),
                },
                escape_forward_slashes=False,
            )
        )

    def close(self):
        pass
