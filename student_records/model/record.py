# ==============================================
# Record (Data Class)
# ==============================================
#
# PURPOSE:
#   The single structured entity this system manages: one student.
#
# WHY THIS FILE EXISTS:
#   Separating the data class from file handling keeps the codec
#   and the store clean. The codec builds these from lines, the
#   store keeps a list of them, the CLI renders them.
#
# CLASSES:
# --------
# - StudentRecord (frozen dataclass)
#
#     Attributes:
#     -----------
#     - roll_number: int   → De-facto key, NOT enforced unique
#     - name: str          → Used for search / delete / name sort
#     - email: str
#     - course: str
#     - marks: float       → Used for the marks sort
#
#     Text fields are stripped; "\n" or "\r" inside one → ValueError
#
# CONSTANTS:
# ----------
# - FIELD_ORDER → Order of fields inside a serialized line
# - TEXT_FIELDS → The str fields normalized on construction
#
# ==============================================

from dataclasses import dataclass


FIELD_ORDER = ("roll_number", "name", "email", "course", "marks")
TEXT_FIELDS = ("name", "email", "course")


@dataclass(frozen=True)
class StudentRecord:
    """
    One student's data.
    
    Frozen so a record held by the store can't be changed behind
    its back; "editing" means delete + add.
    
    Text fields are stripped on construction, which is exactly what
    parsing a line does, so a record always reads back equal to
    itself. Line breaks are rejected: one would split the row.
    """

    roll_number: int
    name: str
    email: str
    course: str
    marks: float

    def __post_init__(self):
        for field_name in TEXT_FIELDS:
            value = getattr(self, field_name).strip()
            if "\n" in value or "\r" in value:
                raise ValueError(f"{field_name} must not contain a line break: {value!r}")
            object.__setattr__(self, field_name, value)

    def matches_name(self, name: str) -> bool:
        """
        Case-insensitive exact comparison against a (trimmed) query.
        
        Args:
            name: Name typed by the user
            
        Returns:
            True if this record's name equals the query ignoring case
        """
        return self.name.lower() == name.strip().lower()

    def __str__(self) -> str:
        return (
            f"Roll No: {self.roll_number}\n"
            f"Name: {self.name}\n"
            f"Email: {self.email}\n"
            f"Course: {self.course}\n"
            f"Marks: {self.marks!r}"
        )
