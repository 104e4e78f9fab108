from .informer import DiskConfig, MetricType
from .exceptions import InformerConfigError, DecodeError, InvalidConfig
from .logging_utils import init_logger

init_logger(__name__)
