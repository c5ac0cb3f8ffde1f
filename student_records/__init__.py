# ==============================================
# Student Record Manager
# ==============================================
#
# Package Structure (4 Layers + Presentation):
#
# student_records/
# ├── model/          # Layer 1: StudentRecord value type
# ├── codec/          # Layer 2: One-record-per-line text encoding
# ├── persistence/    # Layer 3: Flat file adapter + byte offset table
# ├── store/          # Layer 4: In-memory collection (add/find/delete/sort)
# ├── config.py       # Configuration management
# └── cli.py          # Interactive menu entry point
#
# ==============================================

__version__ = "0.1.0"
