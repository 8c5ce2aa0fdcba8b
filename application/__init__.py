"""
Application layer for LiftLog.

This package contains:
- ports/: Protocols the use cases depend on (object store, compose sessions)
- use_cases/: Workflows coordinating domain models and ports
"""
