# models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Profile:
    name: str        # "output:analog-stereo"
    human_name: str  # "Analog Stereo Output"


@dataclass(frozen=True)
class Port:
    name: str
    human_name: str
    profiles: Tuple[str, ...] = ()  # "Part of profile(s)" names, report order


@dataclass
class Card:
    index: str
    profiles: List[Profile] = field(default_factory=list)
    ports: List[Port] = field(default_factory=list)


@dataclass(frozen=True)
class DeviceDescriptor:
    port_name: str
    stream_id: Optional[int] = None  # sink index when the device has a live stream
