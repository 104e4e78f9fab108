from enum import Enum


class MetricType(Enum):
    """
    Which disk quantity an informer reports
    """
    FREESPACE = "freespace"
    REPOSIZE = "reposize"

    def __str__(self):
        return self.value

    @classmethod
    def is_valid(cls, value):
        return isinstance(value, cls)


def metric_type_name(value):
    """
    Canonical lowercase name, or an empty string for anything that is not a MetricType
    """
    if MetricType.is_valid(value):
        return value.value
    return ""
