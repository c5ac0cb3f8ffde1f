# ==============================================
# LAYER 1: MODEL
# ==============================================
#
# The value type that every other layer passes around.
#
# Modules:
# --------
# - record.py  → StudentRecord (roll, name, email, course, marks)
#
# ==============================================

from .record import StudentRecord, FIELD_ORDER

__all__ = ["StudentRecord", "FIELD_ORDER"]
