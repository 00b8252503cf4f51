"""
Infrastructure adapters for the subway bounded context.

Each adapter implements a domain port (ABC) and connects
to the SQL database through SQLAlchemy Core.
"""
