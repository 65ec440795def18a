"""API module for econmap.

API layer boundary:
- Validates inputs, reads the dashboard session
- Returns payloads for the map and chart views
- Forbidden: aggregation logic, file IO, rendering
"""
