"""Models for econmap.

- domain: immutable dataclasses shared by the core (Observation, YearSummary)
- types: pydantic payloads returned by the API layer
"""
