from enum import StrEnum


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"
