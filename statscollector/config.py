# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.

import logging
import os

logger = logging.getLogger(__name__)

WRITE_MODES = ("batching", "synchronous", "asynchronous")
WRITE_PRECISIONS = ("ns", "us", "ms", "s")


def _get_env(key, default=None, cast=None):
    @property
    def _getter(self):
        if not hasattr(self, prop_key):
            val = self._resolve_env(key, default, cast)
            setattr(self, prop_key, val)
        return getattr(self, prop_key)

    prop_key = f"_config_{key}"
    return _getter


def _as_choice(choices):
    def cast(val):
        val = val.strip().lower()
        if val not in choices:
            raise ValueError(val)
        return val

    return cast


as_write_mode = _as_choice(WRITE_MODES)
as_write_mode.__name__ = "write_mode"
as_write_precision = _as_choice(WRITE_PRECISIONS)
as_write_precision.__name__ = "write_precision"


class Config:
    """Connection settings read lazily from the process environment.

    Each property is resolved on first access and cached until `_reset`.
    """

    def _resolve_env(self, key, default=None, cast=None):
        val = os.environ.get(key, default)
        if cast is not None:
            try:
                val = cast(val)
            except (ValueError, TypeError, AttributeError):
                msg = (
                    "Failed to cast environment variable '%s' with "
                    "value '%s' to type %s. Using default value '%s'."
                )
                logger.warning(msg, key, val, cast.__name__, default)
                val = default
        return val

    influxdb_url = _get_env("INFLUXDB_URL", "http://localhost:8086")
    influxdb_org = _get_env("INFLUXDB_ORG", "")
    influxdb_database = _get_env("INFLUXDB_DATABASE", "")
    influxdb_username = _get_env("INFLUXDB_USERNAME", "")
    influxdb_password = _get_env("INFLUXDB_PASSWORD", "")

    write_mode = _get_env("INFLUXDB_WRITE_MODE", "batching", as_write_mode)
    batch_size = _get_env("INFLUXDB_BATCH_SIZE", 1000, int)
    flush_interval = _get_env("INFLUXDB_FLUSH_INTERVAL", 1000, int)
    write_precision = _get_env("INFLUXDB_WRITE_PRECISION", "ns", as_write_precision)

    handler = _get_env("STATSCOLLECTOR_HANDLER", "influxdb")

    @property
    def influxdb_token(self):
        if not hasattr(self, "_config_influxdb_token"):
            token = os.environ.get("INFLUXDB_TOKEN", "")
            if not token and self.influxdb_username:
                # InfluxDB 1.8 accepts "username:password" in place of a token
                token = f"{self.influxdb_username}:{self.influxdb_password}"
            self._config_influxdb_token = token
        return self._config_influxdb_token

    def _reset(self):
        for attr in dir(self):
            if attr.startswith("_config_"):
                delattr(self, attr)


config = Config()
