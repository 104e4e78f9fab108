"""
Remote procedures the disk informer calls on the IPFS connector, by metric type
"""
from diskinformer.exceptions import InvalidConfig
from .metric_type import MetricType


METRIC_TO_RPC = {
    MetricType.FREESPACE: "IPFSFreeSpace",
    MetricType.REPOSIZE: "IPFSRepoSize",
}


def rpc_method_for(metric_type):
    try:
        return METRIC_TO_RPC[metric_type]
    except (KeyError, TypeError):
        raise InvalidConfig(f"no rpc method for metric type {metric_type!r}")
