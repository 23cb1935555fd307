from .frames import DataPoint, Series
from .polar import PolarDataset

__all__ = [
    "DataPoint",
    "Series",
    "PolarDataset",
]
