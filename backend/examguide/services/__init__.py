"""Services Layer: store operations behind each endpoint.

Invariants:
    - Services receive the ExamStore handle; they never look it up themselves
    - One store session per operation
"""
