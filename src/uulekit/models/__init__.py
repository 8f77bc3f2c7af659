"""Record models for the two UULE generations."""

from uulekit.models._base import UuleRecord
from uulekit.models.uulev1 import UulevOneRecord
from uulekit.models.uulev2 import UulevTwoRecord, wall_clock_millis

__all__ = [
    "UuleRecord",
    "UulevOneRecord",
    "UulevTwoRecord",
    "wall_clock_millis",
]
