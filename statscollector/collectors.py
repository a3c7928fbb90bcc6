# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.

import enum
import logging

from statscollector.config import config
from statscollector.mock_collector import new_mock_collector  # noqa: F401

logger = logging.getLogger(__name__)


class CollectorHandler(enum.Enum):
    INFLUXDB = "influxdb"
    FORWARDER = "forwarder"


def _select_collector_handler(cfg=None):
    cfg = cfg or config
    name = (cfg.handler or "").strip().lower()
    try:
        return CollectorHandler(name)
    except ValueError:
        logger.warning(
            "Invalid collector handler: %s Defaulting to %s",
            name,
            CollectorHandler.INFLUXDB.value,
        )
        return CollectorHandler.INFLUXDB


def new_influxdb_collector_from_env():
    """Build an InfluxDB collector from the INFLUXDB_* environment variables."""
    # influxdb_client is slow to import, keep it off the forwarder path
    from statscollector.influxdb_collector import InfluxDBCollector

    return InfluxDBCollector.from_config(config)


def new_collector_from_env():
    """Build the collector named by STATSCOLLECTOR_HANDLER.

    "influxdb" (the default) writes to InfluxDB, "forwarder" writes JSON
    lines to standard output.
    """
    handler = _select_collector_handler()
    logger.debug("identified collector handler as %s", handler)

    if handler == CollectorHandler.FORWARDER:
        from statscollector.log_collector import LogCollector

        return LogCollector(write_precision=config.write_precision)

    return new_influxdb_collector_from_env()
