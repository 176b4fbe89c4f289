"""Browse, filter and edit the tables of a company SQLite database from text commands or Python."""

__version__ = "0.1.0"