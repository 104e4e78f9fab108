from .metric_type import MetricType, metric_type_name
from .config import DiskConfig, DiskEnvConfig, CONFIG_KEY, DEFAULT_METRIC_TTL, DEFAULT_METRIC_TYPE
from .rpc import METRIC_TO_RPC, rpc_method_for
