"""
puissance4.data - Saving and resuming game positions
"""

from puissance4.data.store import load_snapshot, save_snapshot

__all__ = ['load_snapshot', 'save_snapshot']
