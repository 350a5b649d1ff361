import json

from vme_decoder.model.decoded_record import (
    DataWord,
    DecodedRecord,
    EndOfEvent,
    ExtendedTimestamp,
    FillWord,
    ModuleHeader,
    Unrecognized,
    record_to_dict,
)
from vme_decoder.model.enum.output_format_enum import OutputFormat

DEFAULT_UNRECOGNIZED_LABEL = "unrecognized"


class RecordFormatter:
    """Render decoded records as one output line each."""

    def __init__(
        self,
        output_format: OutputFormat = OutputFormat.TEXT,
        show_index: bool = False,
        unrecognized_label: str = DEFAULT_UNRECOGNIZED_LABEL,
    ):
        self.output_format = output_format
        self.show_index = show_index
        self.unrecognized_label = unrecognized_label

    def describe(self, record: DecodedRecord) -> str:
        """Kind-specific descriptor, without the leading hex word."""
        match record:
            case ModuleHeader():
                return (
                    f"{record.kind}, module_id=0x{record.module_id:02x}, "
                    f"module_setting=0x{record.module_setting:x}, data_length={record.data_length} words"
                )
            case DataWord():
                return f"{record.kind}, channel_address={record.channel_address:2d}, mdpp_flags=0x{record.mdpp_flags:x}"
            case ExtendedTimestamp():
                return f"{record.kind}, high_stamp={record.high_stamp}"
            case EndOfEvent():
                return f"{record.kind}, low_stamp={record.low_stamp}"
            case FillWord():
                return f"{record.kind}"
            case Unrecognized():
                return self.unrecognized_label
        raise TypeError(f"Unsupported record type: {type(record).__name__}")

    def format_text(self, record: DecodedRecord) -> str:
        return f"0x{record.word:08x} {self.describe(record)}"

    def to_payload(self, record: DecodedRecord) -> dict:
        payload = record_to_dict(record)
        if isinstance(record, Unrecognized):
            payload["kind"] = self.unrecognized_label
        return payload

    def format(self, record: DecodedRecord, index: int | None = None) -> str:
        with_index = self.show_index and index is not None

        if self.output_format == OutputFormat.JSON:
            payload = self.to_payload(record)
            if with_index:
                payload = {"index": index, **payload}
            return json.dumps(payload, ensure_ascii=False)

        line = self.format_text(record)
        if with_index:
            return f"{index:4d}: {line}"
        return line
