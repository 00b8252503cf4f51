"""
Domain layer package.

Contains the catalog's business rules: stations, sections, the
section list of a line, and the port interfaces persistence must
satisfy. No framework imports, no IO, no side effects.
"""
