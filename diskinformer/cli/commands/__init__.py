from .base import diskinformer_cli
from . import disk
