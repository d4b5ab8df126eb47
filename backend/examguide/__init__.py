"""Exam Guide Package: tube classifications and the unique-exam master list.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
