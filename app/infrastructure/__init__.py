"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the SQL schema, the engine and the
repositories built on SQLAlchemy Core.
"""
