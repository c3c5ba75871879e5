"""
Shared test constants
"""
from datetime import date

# Clock used by the service fixture so submission dates are predictable
FIXED_DAY = date(2024, 3, 15)

SEED_PROFESSORS = ["Juan Pérez", "Sebastián Díaz"]
SEED_STUDENTS = ["Pedro Gómez", "Roberto Riberos"]
SEED_SUBJECTS = ["Matemática", "Lengua"]

TASK_PAYLOAD = {
    "title": "Fractions",
    "description": "Exercises 1 to 10",
    "dueDate": "2024-03-20",
    "studentId": 1,
    "subjectId": 1,
}
