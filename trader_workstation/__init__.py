"""
Tiny Trader Workstation
REST backend serving portfolio reports from a broker connector
"""

__version__ = "0.1.0"
