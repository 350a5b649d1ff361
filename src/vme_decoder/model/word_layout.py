"""
Bit layout of mesytec VME data words.

Based on 'Decode the data structure' from AN001 (using mesytec VME modules).
Every field is extracted as `(word & MASK) >> SHIFT`.
"""

WORD_MASK = 0xFFFFFFFF

# Module header
HEADER_MASK = 0xC0000000
HEADER_RESULT = 0x40000000
DATA_LENGTH_MASK = 0x000003FF
DATA_LENGTH_SHIFT = 0
MODULE_ID_MASK = 0x00FF0000
MODULE_ID_SHIFT = 16
MODULE_SETTING_MASK = 0x0000FC00
MODULE_SETTING_SHIFT = 10

# Data word (MDPP and MxDC markers)
DATA_MASK_MDPP = 0xF0000000
DATA_RESULT_MDPP = 0x10000000
DATA_MASK_MXDC = 0xFF800000
DATA_RESULT_MXDC = 0x04000000
CHANNEL_ADDRESS_MASK = 0x003F0000
CHANNEL_ADDRESS_SHIFT = 16
MDPP_FLAGS_MASK = 0x0FC00000
MDPP_FLAGS_SHIFT = 18
MDPP_FLAGS_WIDTH_MASK = 0xFF  # mdpp_flags is one byte wide

# Extended timestamp, differs from the MxDC data marker only in bit 23
EXT_TS_MASK = 0xFF800000
EXT_TS_RESULT = 0x04800000
HIGH_STAMP_MASK = 0x0000FFFF
HIGH_STAMP_SHIFT = 0

# End of event
EOE_MASK = 0xC0000000
EOE_RESULT = 0xC0000000
LOW_STAMP_MASK = 0x3FFFFFFF
LOW_STAMP_SHIFT = 0

FILL_WORD = 0x00000000
