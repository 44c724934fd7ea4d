"""Resolution failures.

Each kind maps to its own user-facing message so callers can react
differently (for example, suggest listing installable versions only when a
specific version is missing).
"""


class ResolutionError(LookupError):
    """Base class for every way a specifier can fail to resolve."""

    def message(self, prog: str) -> str:
        """Diagnostic line shown to the user."""
        raise NotImplementedError


class SystemNotFound(ResolutionError):
    """``system`` was requested but no system toolchain is on the path."""

    def __init__(self) -> None:
        super().__init__("system version not found in PATH")

    def message(self, prog: str) -> str:
        return f"{prog}: system version not found in PATH"


class NoVersionsInstalled(ResolutionError):
    """``latest`` was requested but nothing is installed."""

    def __init__(self) -> None:
        super().__init__("no versions installed")

    def message(self, prog: str) -> str:
        return f"{prog}: no versions installed"


class VersionNotInstalled(ResolutionError):
    """No resolution stage matched the specifier."""

    def __init__(self, specifier: str) -> None:
        super().__init__(f"version '{specifier}' not installed")
        self.specifier = specifier

    def message(self, prog: str) -> str:
        return f"{prog}: version '{self.specifier}' not installed"
