"""Native build classification for installed packages."""

from __future__ import annotations

from enum import Enum


class NativeModuleType(Enum):
    NONE = "none"
    PREBUILD = "prebuild"
    NODE_GYP = "node-gyp"
