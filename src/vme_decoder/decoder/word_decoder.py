"""
Decoder for single mesytec VME data words.

Each word is classified independently. The predicates overlap (the MxDC data
marker and the extended timestamp share the top byte and differ only in bit
23), so classification is an ordered first-match chain:

    header -> data -> extended timestamp -> end of event -> fill -> unrecognized
"""

from typing import Iterable

from vme_decoder.model import word_layout as layout
from vme_decoder.model.decoded_record import (
    DataWord,
    DecodedRecord,
    EndOfEvent,
    ExtendedTimestamp,
    FillWord,
    ModuleHeader,
    Unrecognized,
)


def _field(word: int, mask: int, shift: int) -> int:
    return (word & mask) >> shift


def is_header(word: int) -> bool:
    return (word & layout.HEADER_MASK) == layout.HEADER_RESULT


def is_data(word: int) -> bool:
    return (
        (word & layout.DATA_MASK_MDPP) == layout.DATA_RESULT_MDPP  # MDPP
        or (word & layout.DATA_MASK_MXDC) == layout.DATA_RESULT_MXDC  # MxDC
    )


def is_extended_timestamp(word: int) -> bool:
    return (word & layout.EXT_TS_MASK) == layout.EXT_TS_RESULT


def is_fill(word: int) -> bool:
    return word == layout.FILL_WORD


def is_end_of_event(word: int) -> bool:
    return (word & layout.EOE_MASK) == layout.EOE_RESULT


def decode(word: int) -> DecodedRecord:
    """
    Decode one 32-bit data word.

    Total over all inputs: words matching no known pattern become
    `Unrecognized`. Only the fields of the selected kind are extracted.
    """
    word &= layout.WORD_MASK

    if is_header(word):
        return ModuleHeader(
            word=word,
            module_id=_field(word, layout.MODULE_ID_MASK, layout.MODULE_ID_SHIFT),
            module_setting=_field(word, layout.MODULE_SETTING_MASK, layout.MODULE_SETTING_SHIFT),
            data_length=_field(word, layout.DATA_LENGTH_MASK, layout.DATA_LENGTH_SHIFT),
        )

    if is_data(word):
        return DataWord(
            word=word,
            channel_address=_field(word, layout.CHANNEL_ADDRESS_MASK, layout.CHANNEL_ADDRESS_SHIFT),
            mdpp_flags=_field(word, layout.MDPP_FLAGS_MASK, layout.MDPP_FLAGS_SHIFT) & layout.MDPP_FLAGS_WIDTH_MASK,
        )

    if is_extended_timestamp(word):
        return ExtendedTimestamp(
            word=word,
            high_stamp=_field(word, layout.HIGH_STAMP_MASK, layout.HIGH_STAMP_SHIFT),
        )

    if is_end_of_event(word):
        return EndOfEvent(
            word=word,
            low_stamp=_field(word, layout.LOW_STAMP_MASK, layout.LOW_STAMP_SHIFT),
        )

    if is_fill(word):
        return FillWord(word=word)

    return Unrecognized(word=word)


def decode_words(words: Iterable[int]) -> list[DecodedRecord]:
    """Decode a batch of words, preserving input order."""
    return [decode(word) for word in words]
