"""Traffic light value object."""

from enum import Enum


class TrafficLight(Enum):
    """Closed enumeration of traffic light colours."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
