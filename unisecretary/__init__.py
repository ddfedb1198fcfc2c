"""University secretary: students, professors, courses, semesters and grades kept in text files."""

__version__ = "0.1.0"