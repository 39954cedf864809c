"""
Application Layer for the workout tracker.

This package contains:
- ports/: Abstract repository and storage interfaces (what the app needs)
- use_cases/: Routine workflows coordinating domain logic and ports
- exceptions.py: Errors shared with the infrastructure layer
"""
