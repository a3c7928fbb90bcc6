# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.

import logging

from influxdb_client import InfluxDBClient
from influxdb_client import Point as InfluxPoint
from influxdb_client.client.write_api import WriteOptions, WriteType

from statscollector.stats_collector import Point, StatsCollector, invalid_fields

logger = logging.getLogger(__name__)


def _on_success(conf, data):
    logger.debug("Wrote batch to %s", conf[0])


def _on_error(conf, data, exception):
    logger.warning("Failed to write batch to %s: %s", conf[0], exception)


def _on_retry(conf, data, exception):
    logger.debug("Retrying batch write to %s: %s", conf[0], exception)


def _write_api_from_config(client, config):
    write_type = WriteType[config.write_mode]
    write_options = WriteOptions(
        write_type=write_type,
        batch_size=config.batch_size,
        flush_interval=config.flush_interval,
    )
    if write_type is WriteType.batching:
        return client.write_api(
            write_options=write_options,
            success_callback=_on_success,
            error_callback=_on_error,
            retry_callback=_on_retry,
        )
    return client.write_api(write_options=write_options)


class InfluxDBCollector(StatsCollector):
    """
    Writes points to InfluxDB through the write API of `influxdb_client`.

    When and how points reach the server is up to the write API: in the
    default batching mode they are buffered and flushed on a background
    thread, and failures there are only logged.
    """

    def __init__(self, client, write_api, bucket, org="", write_precision="ns"):
        self.client = client
        self.write_api = write_api
        self.bucket = bucket
        self.org = org
        self.write_precision = write_precision

    @classmethod
    def from_config(cls, config):
        client = InfluxDBClient(
            url=config.influxdb_url,
            token=config.influxdb_token,
            org=config.influxdb_org,
        )
        try:
            write_api = _write_api_from_config(client, config)
        except Exception:
            client.close()
            raise
        logger.debug(
            "Created InfluxDB collector for %s, database '%s', %s writes",
            config.influxdb_url,
            config.influxdb_database,
            config.write_mode,
        )
        return cls(
            client,
            write_api,
            config.influxdb_database,
            org=config.influxdb_org,
            write_precision=config.write_precision,
        )

    def store_point(self, namespace, tags, fields, timestamp):
        bad_keys = invalid_fields(fields)
        if bad_keys:
            logger.warning(
                "Ignoring fields %s of point '%s' because they are not bool, "
                "numeric or string values",
                bad_keys,
                namespace,
            )
            fields = {k: v for k, v in fields.items() if k not in bad_keys}
            if not fields:
                logger.warning("Ignoring point '%s' with no valid fields", namespace)
                return

        point = Point(namespace, tags, fields, timestamp)
        record = InfluxPoint.from_dict(
            point.to_dict(), write_precision=self.write_precision
        )
        try:
            self.write_api.write(bucket=self.bucket, org=self.org, record=record)
        except Exception:
            # only synchronous writes raise here; failures never reach the caller
            logger.warning("Failed to write point for '%s'", namespace, exc_info=True)

    def close(self):
        # write API first: closing it flushes buffered points
        self.write_api.close()
        self.client.close()
        logger.debug("Closed InfluxDB collector")
