# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Interactive menu on top of RecordStore. This is how users
#   interact with the system.
#
# USAGE:
# ------
#   python -m student_records.cli
#   python -m student_records.cli --data-file /tmp/students.txt
#
# MENU:
# -----
#   1. Add Student          5. Sort by Marks
#   2. View All Students    6. Sort by Name
#   3. Search by Name       7. Direct-Offset Read
#   4. Delete by Name       8. Save and Exit
#
# IMPLEMENTATION:
# ---------------
# - argparse for the command line
# - input() / print() for the menu, one prompt per line
# - End of input behaves like "Save and Exit"
#
# ==============================================

import argparse
from typing import Optional

from student_records.config import get_config
from student_records.model.record import StudentRecord
from student_records.store.record_store import RecordStore


MENU = """===== Student Record Menu =====
1. Add Student
2. View All Students
3. Search by Name
4. Delete by Name
5. Sort by Marks
6. Sort by Name
7. Direct-Offset Read
8. Save and Exit"""


def _prompt(text: str) -> str:
    return input(text).strip()


def view_all(store: RecordStore) -> None:
    records = store.records
    if not records:
        print("No students to display.")
        return
    for record in records:
        print(f"{record}\n")


def add_student(store: RecordStore) -> None:
    try:
        roll_number = int(_prompt("Enter Roll No: "))
        name = _prompt("Enter Name: ")
        email = _prompt("Enter Email: ")
        course = _prompt("Enter Course: ")
        marks = float(_prompt("Enter Marks: "))
    except ValueError:
        print("Invalid input. Student not added.")
        return
    
    store.add(StudentRecord(roll_number, name, email, course, marks))
    print("Student added.")


def search_student(store: RecordStore) -> None:
    query = _prompt("Enter name to search: ")
    found = store.find_by_name(query)
    if found is not None:
        print(f"Found:\n{found}")
    else:
        print(f"No student found with name: {query}")


def delete_student(store: RecordStore) -> None:
    name = _prompt("Enter name to delete: ")
    if store.delete_by_name(name):
        print("Student(s) deleted.")
    else:
        print("No matching student found.")


def direct_offset_read(store: RecordStore) -> None:
    offset_count = len(store.offsets)
    if offset_count == 0:
        print("No records available for random read.")
        return
    
    try:
        index = int(_prompt(f"Enter record index (1..{offset_count}, 0 to cancel): "))
    except ValueError:
        index = -1
    
    if index <= 0:
        print("Cancelled.")
        return
    
    record = store.read_at_index(index)
    if record is not None:
        print(f"Record at index {index}:\n{record}")
    else:
        print("Could not read record at that index.")


def save_and_exit(store: RecordStore) -> None:
    if store.persist():
        print(f"✓ All records saved to {store.data_file}")
    else:
        print("✗ Error saving records.")
    print("Exiting. Goodbye!")


def run_menu(store: RecordStore) -> None:
    """
    Run the menu loop until the user saves and exits (or input ends).
    
    Args:
        store: An already-initialized RecordStore
    """
    while True:
        print(MENU)
        try:
            choice = _prompt("Enter choice: ")
            
            if choice == "1":
                add_student(store)
            elif choice == "2":
                view_all(store)
            elif choice == "3":
                search_student(store)
            elif choice == "4":
                delete_student(store)
            elif choice == "5":
                store.sort_by_marks_descending()
                print("Sorted by marks (descending):")
                view_all(store)
            elif choice == "6":
                store.sort_by_name_ascending()
                print("Sorted by name (ascending):")
                view_all(store)
            elif choice == "7":
                direct_offset_read(store)
            elif choice == "8":
                save_and_exit(store)
                return
            else:
                print("Invalid choice. Try again.")
        except EOFError:
            print()
            save_and_exit(store)
            return
        
        print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="student-records",
        description="Manage student records stored in a flat text file."
    )
    parser.add_argument(
        "--data-file",
        default=None,
        help="Backing file (default: STUDENT_RECORDS_FILE or students.txt)"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    
    store = RecordStore(data_file=args.data_file, config=config)
    store.ensure_file()
    
    if store.initialize():
        print()
        view_all(store)
    
    run_menu(store)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
