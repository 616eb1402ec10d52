"""
Core app - Shared abstractions and utilities.

This app provides:
- Typed service errors and their HTTP translation (errors)
- Declarative payload validation (validation)
- Health and readiness endpoints (api)
"""
