"""
Subway bounded context — domain layer.

This module contains all domain logic for the subway catalog:
- Stations
- Sections and the ordered section list of a line
- Lines (aggregate root)
"""
