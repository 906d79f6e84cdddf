"""
Registrar: student, course and enrollment bookkeeping.

Keeps students and courses in a consistent in-memory registry, persists it to
flat delimited text files and produces small CSV reports.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "Student, course and enrollment tracking console application"
