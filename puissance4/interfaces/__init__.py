"""
puissance4.interfaces - User interfaces for Puissance 4

Only the command-line front end exists for now.
"""

# Don't import anything here to avoid circular imports
__all__ = []
