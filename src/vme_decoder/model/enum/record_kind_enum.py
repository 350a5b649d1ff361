from enum import StrEnum


class RecordKind(StrEnum):
    """Kinds of decoded mesytec VME data words. Values double as the text descriptor."""

    MODULE_HEADER = "module_header"
    DATA_WORD = "data_word"
    EXTENDED_TIMESTAMP = "extended_ts"
    END_OF_EVENT = "end_of_event"
    FILL_WORD = "fill_word"
    UNRECOGNIZED = "unrecognized"
