from .disk import DiskConfig, MetricType
