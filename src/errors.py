"""
Custom exceptions for Palawija.

Every error carries an optional ``hint``: the next step the user can take.
"""


class PalawijaError(Exception):
    """Base exception class for all Palawija errors."""

    def __init__(self, message: str, hint: str = None):
        self.hint = hint
        super().__init__(message)


class ConfigurationError(PalawijaError):
    """Raised when the runtime environment cannot provide required settings."""
    pass


class InvalidVersionFormat(PalawijaError):
    """Raised when a requested version string is not usable."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(
            f"Invalid version format '{version}'",
            hint="Use a version like '8.3.0' or '8.2.15'",
        )


class NetworkFailure(PalawijaError):
    """Raised on transport errors, timeouts and non-success HTTP statuses."""

    def __init__(self, url: str, reason: str, hint: str = None):
        self.url = url
        self.reason = reason
        super().__init__(
            f"Request to {url} failed: {reason}",
            hint=hint or "Check your internet connection and try again",
        )


class ExtractionError(PalawijaError):
    """Raised when a downloaded archive cannot be unpacked."""

    def __init__(self, archive: str, target: str, reason: str):
        self.archive = archive
        self.target = target
        super().__init__(
            f"Failed to extract {archive}: {reason}",
            hint=f"Remove {target} and run the install again",
        )


class InstallationError(PalawijaError):
    """Raised when the installation directory cannot be prepared or cleaned up."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Cannot write to {path}: {reason}",
            hint=f"Check that {path} is a writable directory, or set PALAWIJA_ROOT to one",
        )


class RepositoryReadError(PalawijaError):
    """Raised when the installation root exists but cannot be scanned."""

    def __init__(self, root: str, reason: str):
        self.root = root
        super().__init__(
            f"Cannot read installation directory {root}: {reason}",
            hint=f"Check the permissions of {root}",
        )


class NotInstalled(PalawijaError):
    """Raised when activating a version that has never been installed."""

    def __init__(self, version: str, expected: str):
        self.version = version
        self.expected = expected
        super().__init__(
            f"PHP version {version} is not installed (expected {expected})",
            hint=f"Run install first: palawija install {version}",
        )


class NotCompiled(PalawijaError):
    """Raised when activating a version whose source has not been built."""

    def __init__(self, version: str, binary: str):
        self.version = version
        self.binary = binary
        super().__init__(
            f"PHP version {version} is installed but not compiled (no binary at {binary})",
            hint="Compile the source first (./configure && make && make install), then retry",
        )


class PointerError(PalawijaError):
    """Base class for failures while changing the global activation pointer."""

    def __init__(self, message: str, pointer: str, reason: str, hint: str = None):
        self.pointer = pointer
        self.reason = reason
        super().__init__(
            f"{message}: {reason}",
            hint=hint or "Retry with elevated privileges, e.g. sudo palawija use <version>",
        )


class PointerRemovalError(PointerError):
    """The existing pointer could not be removed or replaced."""

    def __init__(self, pointer: str, reason: str):
        super().__init__(f"Could not remove old pointer {pointer}", pointer, reason)


class PointerCreationError(PointerError):
    """The new pointer could not be created.

    ``pointer_present`` records whether an (old) pointer still exists, so the
    caller can tell the user when no PHP is active any more.
    """

    def __init__(self, pointer: str, reason: str, pointer_present: bool = True):
        self.pointer_present = pointer_present
        message = f"Could not create new pointer {pointer}"
        if not pointer_present:
            message += " (no PHP is currently active)"
        super().__init__(message, pointer, reason)


class PointerReadError(PointerError):
    """The current pointer could not be read."""

    def __init__(self, pointer: str, reason: str):
        super().__init__(f"Could not read pointer {pointer}", pointer, reason,
                         hint=f"Check that {pointer} is readable by the current user")
