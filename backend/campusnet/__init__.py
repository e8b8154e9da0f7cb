"""
Campus research network backend.

Profiles, research domains, papers and inbox messaging on top of a flat
key-value store, an external identity provider and an external blob store.
"""

__version__ = "1.0.0"
