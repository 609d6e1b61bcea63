from enum import Enum


class ResourceType(str, Enum):
    GUIDE = "guide"
    VIDEO = "video"
    EXERCISE = "exercise"
    PROJECT = "project"
