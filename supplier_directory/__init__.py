"""
Supplier Directory
Public supplier catalogue with an admin console and bulk CSV import.
"""

__version__ = "0.1.0"
