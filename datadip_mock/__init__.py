"""Data Dip Mock: canned PureCloud Web Services Data Dip Connector endpoints.

Invariants:
    - Package root has no import side-effects beyond the version string
"""

__version__ = "1.0.0"
