"""
NoteNook
Deployment and interaction tooling for the NoteNook contract
"""

__version__ = "0.1.0"
