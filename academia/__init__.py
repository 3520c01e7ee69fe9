"""
Academia: an in-memory model of a university's academic records.

Covers people (students and teachers), courses, groups (class sections)
and the enrollment and assignment relationships between them.
"""

__version__ = "1.0.0"
__author__ = "Academia Development Team"
__description__ = "In-memory university academic records model"
