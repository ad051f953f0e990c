from __future__ import annotations

"""
Domain Error Types.

Only a failure to resolve the scan root is surfaced to callers; every
failure below the root degrades to an omission in the returned view.
"""


class RootUnresolvableError(FileNotFoundError):
    """
    Raised when the scan root cannot be made absolute, stat'ed or listed.

    Attributes:
        path: The root path as supplied by the caller.
        reason: Description of the underlying failure.
    """

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Repository root cannot be resolved: '{path}'"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
