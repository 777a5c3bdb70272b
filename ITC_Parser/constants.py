# maps the frame tags found in an .itc stream to a readable name (log output)
frame_readable_map = {
    "itch": "Cache Header",
    "artw": "Artwork Section",  # obsolete, never carries an image
    "item": "Image Item",
}

# size (4 bytes, big endian) + tag (4 bytes)
FRAME_HEADER_SIZE = 8

# itch is a thin wrapper: 16 unknown bytes, then the real tag of the frame
ITCH_PREAMBLE_SIZE = 16

# artw body is always 256 bytes of nothing useful (per itc.py)
ARTW_BODY_SIZE = 256

# The item "offset" field is the distance from the frame header start to the
# image data. Two known values mark an extra info preamble ahead of the ids.
# These come from reverse engineering and must not be generalised.
ITUNES_9 = 208
ITUNES_OLD = 216
legacy_preamble_map = {
    ITUNES_9: 16,
    ITUNES_OLD: 20,
}

# library persistent id (8) + track persistent id (8) + method (4)
ITEM_IDS_SIZE = 8 + 8 + 4

# format tag (4) + unknown (4) + width (4) + height (4)
ITEM_INFO_SIZE = 4 + 4 + 4 + 4
