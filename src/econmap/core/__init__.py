"""Core wiring for a dashboard session.

- settings: environment-driven configuration
- session: observations + summary table + selection controller
"""
