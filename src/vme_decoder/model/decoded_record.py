from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Union

from vme_decoder.model.enum.record_kind_enum import RecordKind


@dataclass(frozen=True)
class ModuleHeader:
    """Start of an event block from one module."""

    kind: ClassVar[RecordKind] = RecordKind.MODULE_HEADER

    word: int
    module_id: int
    module_setting: int
    data_length: int  # number of following words


@dataclass(frozen=True)
class DataWord:
    """One channel sample."""

    kind: ClassVar[RecordKind] = RecordKind.DATA_WORD

    word: int
    channel_address: int
    mdpp_flags: int


@dataclass(frozen=True)
class ExtendedTimestamp:
    kind: ClassVar[RecordKind] = RecordKind.EXTENDED_TIMESTAMP

    word: int
    high_stamp: int


@dataclass(frozen=True)
class EndOfEvent:
    kind: ClassVar[RecordKind] = RecordKind.END_OF_EVENT

    word: int
    low_stamp: int


@dataclass(frozen=True)
class FillWord:
    kind: ClassVar[RecordKind] = RecordKind.FILL_WORD

    word: int


@dataclass(frozen=True)
class Unrecognized:
    """Word matching none of the known patterns."""

    kind: ClassVar[RecordKind] = RecordKind.UNRECOGNIZED

    word: int


DecodedRecord = Union[ModuleHeader, DataWord, ExtendedTimestamp, EndOfEvent, FillWord, Unrecognized]


def record_to_dict(record: DecodedRecord) -> dict[str, Any]:
    """
    Flatten a record into a JSON-ready dict.

    The raw word is rendered as a fixed-width hex string, the kind as its
    descriptor, followed by the kind's own fields.
    """
    fields = asdict(record)
    word = fields.pop("word")
    return {"word": f"0x{word:08x}", "kind": record.kind.value, **fields}
