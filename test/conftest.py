import pytest


@pytest.fixture
def reference_words() -> list[int]:
    """One event block from an MDPP module: header, six data words, end of event."""
    return [
        0x40010C07,
        0x10100868,
        0x1000036E,
        0x103002AA,
        0x10110868,
        0x10010417,
        0x10310317,
        0xC18D01BD,
    ]


@pytest.fixture
def reference_lines() -> list[str]:
    return [
        "0x40010c07 module_header, module_id=0x01, module_setting=0x3, data_length=7 words",
        "0x10100868 data_word, channel_address=16, mdpp_flags=0x0",
        "0x1000036e data_word, channel_address= 0, mdpp_flags=0x0",
        "0x103002aa data_word, channel_address=48, mdpp_flags=0x0",
        "0x10110868 data_word, channel_address=17, mdpp_flags=0x0",
        "0x10010417 data_word, channel_address= 1, mdpp_flags=0x0",
        "0x10310317 data_word, channel_address=49, mdpp_flags=0x0",
        "0xc18d01bd end_of_event, low_stamp=26018237",
    ]
