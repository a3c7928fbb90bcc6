import os
import unittest
from types import SimpleNamespace
from unittest.mock import patch

from statscollector.collectors import (
    CollectorHandler,
    _select_collector_handler,
    new_collector_from_env,
    new_influxdb_collector_from_env,
    new_mock_collector,
)
from statscollector.config import config
from statscollector.log_collector import LogCollector
from statscollector.mock_collector import MockCollector


class TestSelectCollectorHandler(unittest.TestCase):
    def test_select_influxdb(self):
        self.assertEqual(
            CollectorHandler.INFLUXDB,
            _select_collector_handler(SimpleNamespace(handler="influxdb")),
        )

    def test_select_forwarder(self):
        self.assertEqual(
            CollectorHandler.FORWARDER,
            _select_collector_handler(SimpleNamespace(handler=" Forwarder ")),
        )

    @patch("statscollector.collectors.logger.warning")
    def test_select_invalid_falls_back_to_influxdb(self, mock_logger_warning):
        self.assertEqual(
            CollectorHandler.INFLUXDB,
            _select_collector_handler(SimpleNamespace(handler="purple")),
        )
        mock_logger_warning.assert_called_once_with(
            "Invalid collector handler: %s Defaulting to %s", "purple", "influxdb"
        )


class TestNewCollectorFromEnv(unittest.TestCase):
    def setUp(self):
        config._reset()
        self.addCleanup(config._reset)

    @patch.dict(os.environ, {"STATSCOLLECTOR_HANDLER": "forwarder"})
    def test_forwarder_from_env(self):
        collector = new_collector_from_env()
        self.assertIsInstance(collector, LogCollector)
        self.assertEqual(collector.write_precision, "ns")

    @patch.dict(
        os.environ,
        {"STATSCOLLECTOR_HANDLER": "forwarder", "INFLUXDB_WRITE_PRECISION": "ms"},
    )
    def test_forwarder_uses_configured_precision(self):
        self.assertEqual(new_collector_from_env().write_precision, "ms")

    @patch.dict(
        os.environ,
        {
            "STATSCOLLECTOR_HANDLER": "influxdb",
            "INFLUXDB_URL": "http://influx:8086",
            "INFLUXDB_TOKEN": "s3cr3t",
            "INFLUXDB_DATABASE": "stats",
            "INFLUXDB_WRITE_MODE": "synchronous",
        },
    )
    @patch("statscollector.influxdb_collector.InfluxDBClient")
    def test_influxdb_from_env(self, mock_client_cls):
        collector = new_collector_from_env()

        mock_client_cls.assert_called_once_with(
            url="http://influx:8086", token="s3cr3t", org=""
        )
        self.assertEqual(collector.bucket, "stats")
        self.assertIs(collector.client, mock_client_cls.return_value)

    @patch.dict(os.environ, {"INFLUXDB_DATABASE": "telemetry"})
    @patch("statscollector.influxdb_collector.InfluxDBClient")
    def test_new_influxdb_collector_from_env(self, mock_client_cls):
        collector = new_influxdb_collector_from_env()
        self.assertEqual(collector.bucket, "telemetry")
        self.assertEqual(collector.write_precision, "ns")

    def test_new_mock_collector(self):
        self.assertIsInstance(new_mock_collector(), MockCollector)
