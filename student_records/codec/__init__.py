# ==============================================
# LAYER 2: CODEC
# ==============================================
#
# This package turns a StudentRecord into one line of text and
# back. It knows nothing about files or byte offsets.
#
# Modules:
# --------
# - line_codec.py  → serialize / parse a single delimited line
#
# ==============================================

from .line_codec import LineCodec, MIN_FIELD_COUNT

__all__ = ["LineCodec", "MIN_FIELD_COUNT"]
