"""
NoteNook Errors
"""


class NoteNookError(Exception):
    """Base class for NoteNook tooling errors"""


class ArtifactError(NoteNookError):
    """Compiled artifact is malformed or could not be produced"""


class ArtifactNotFoundError(NoteNookError, FileNotFoundError):
    """Compiled artifact does not exist on disk"""


class DeploymentError(NoteNookError):
    """Contract deployment or its confirmation failed"""


class TransactionFailedError(NoteNookError):
    """Mined transaction reported a failed status"""

    def __init__(self, message: str, receipt=None):
        super().__init__(message)
        self.receipt = receipt
