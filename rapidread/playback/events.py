from enum import Enum


class PlaybackState(Enum):
    IDLE = "idle"
    PAUSED = "paused"
    PLAYING = "playing"


class PlaybackEvent(Enum):
    LOADED = "loaded"
    STARTED = "started"
    PAUSED = "paused"
    ADVANCED = "advanced"
    SEEKED = "seeked"
    FINISHED = "finished"
    RATE_CHANGED = "rate_changed"
    RESET = "reset"
