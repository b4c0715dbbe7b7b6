"""
Gradebook: record and analyse student evaluations per year group and course.

A referent (a school teacher) registers, logs in, creates year groups, courses,
students and evaluations, and runs per-course analyses, per-student
certificates and per-period listings.
"""

__version__ = "1.0.0"
__author__ = "Gradebook Development Team"
__description__ = "Evaluation records and reports for referents"
