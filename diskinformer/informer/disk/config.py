from datetime import timedelta
from typing import Optional
import logging

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_settings import SettingsConfigDict

from diskinformer.config_bases import ComponentConfig, InformerConfigBase
from diskinformer.duration import MAX_DURATION, format_duration, parse_duration
from diskinformer.exceptions import DecodeError, InvalidConfig
from .metric_type import MetricType, metric_type_name

LOGGER = logging.getLogger(__name__)

CONFIG_KEY = "disk"

DEFAULT_METRIC_TTL = timedelta(seconds=30)
DEFAULT_METRIC_TYPE = MetricType.FREESPACE

_METRIC_TYPES = {metric_type.value: metric_type for metric_type in MetricType}


class DiskJsonConfig(BaseModel):
    """
    Persisted shape of a DiskConfig. Every value is kept as text, interpretation happens in DiskConfig.
    """
    model_config = ConfigDict(strict=True, extra='ignore')

    metric_ttl: Optional[str] = ""
    metric_type: Optional[str] = ""


class DiskEnvConfig(InformerConfigBase):
    """
    Environment overrides for a DiskConfig, e.g. DISKINFORMER_DISK_METRIC_TTL=1m
    """
    metric_ttl: Optional[str] = None
    metric_type: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="DISKINFORMER_DISK_")


class DiskConfig(ComponentConfig, BaseModel):
    """
    Used to initialize a disk informer and customize the type and parameters of the metric it produces.
    """
    metric_ttl: timedelta = DEFAULT_METRIC_TTL
    metric_type: MetricType = DEFAULT_METRIC_TYPE

    def config_key(self):
        return CONFIG_KEY

    def default(self):
        self.metric_ttl = DEFAULT_METRIC_TTL
        self.metric_type = DEFAULT_METRIC_TYPE

    def validate(self):
        """
        Checks that the fields have working values, at least in appearance.

        :raises InvalidConfig: on the first bad field
        """
        if not timedelta(0) < self.metric_ttl <= MAX_DURATION:
            raise InvalidConfig("disk.metric_ttl is invalid")
        if not MetricType.is_valid(self.metric_type):
            raise InvalidConfig("disk.metric_type is invalid")

    def load_json(self, raw, logger=None):
        """
        Reads the fields from a JSON document as generated by to_json, then validates them.

        An unparseable metric_ttl is not an error here; it leaves the ttl at zero, which validation rejects.

        :param raw: bytes or str
        :param logger: where decode failures are reported; defaults to this module's logger
        :raises DecodeError: the document is not a JSON object of strings
        :raises InvalidConfig: a field holds an unusable value
        """
        if not logger:
            logger = LOGGER
        try:
            jcfg = DiskJsonConfig.model_validate_json(raw)
        except ValidationError as e:
            if raw.strip() not in (b'null', 'null'):
                logger.error("Error unmarshaling disk informer config")
                raise DecodeError(f"Error unmarshaling disk informer config: {e}") from e
            jcfg = DiskJsonConfig()
        self._apply_json_config(jcfg)

    def to_json(self):
        """
        Generates a human-friendly JSON representation of this config, as bytes
        """
        return self._to_json_config().model_dump_json(indent=4).encode()

    def apply_env_vars(self):
        """
        Overrides fields with any DISKINFORMER_DISK_* environment variables, then validates.
        """
        jcfg = self._to_json_config()
        overrides = DiskEnvConfig().model_dump(exclude_none=True)
        if overrides:
            LOGGER.debug(f"Applying environment overrides to disk informer config: {sorted(overrides)}")
        self._apply_json_config(jcfg.model_copy(update=overrides))

    def _to_json_config(self):
        return DiskJsonConfig(
            metric_ttl=format_duration(self.metric_ttl),
            metric_type=metric_type_name(self.metric_type),
        )

    def _apply_json_config(self, jcfg):
        try:
            self.metric_ttl = parse_duration(jcfg.metric_ttl or "")
        except ValueError:
            LOGGER.debug(f"disk.metric_ttl {jcfg.metric_ttl!r} is not a duration, leaving it at zero")
            self.metric_ttl = timedelta(0)

        try:
            self.metric_type = _METRIC_TYPES[jcfg.metric_type or ""]
        except KeyError:
            raise InvalidConfig("disk.metric_type is invalid") from None

        self.validate()

    def __str__(self):
        return self.to_json().decode()
