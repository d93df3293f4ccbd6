"""
Firebird Embedded - lifecycle of a single embedded Firebird database

Starts the embedded engine, creates a throwaway database for tests or local
development, hands out its connection properties, and drops it again on
shutdown.
"""

__version__ = "0.1.0"
