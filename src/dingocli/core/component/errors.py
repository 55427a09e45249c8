"""Error kinds raised by component catalog, resolver, ledger and manager.

None of these are retried internally. Each carries the component name and
version (when known) so the CLI can render a precise message.
"""

from pathlib import Path


class ComponentError(Exception):
    """Base class for component management failures."""

    def __init__(self, message: str, *, name: str | None = None, version: str | None = None):
        super().__init__(message)
        self.name = name
        self.version = version


class ParseError(ComponentError):
    """Metadata payload could not be parsed into a catalog."""

    def __init__(self, message: str, *, payload: bytes, name: str | None = None):
        self.payload_size = len(payload)
        self.snippet = payload[:80].decode("utf-8", errors="replace")
        super().__init__(
            f"{message} (size={self.payload_size}, payload={self.snippet!r})",
            name=name,
        )


class FetchError(ComponentError):
    """Remote metadata could not be retrieved."""

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: int | None = None,
        name: str | None = None,
    ):
        super().__init__(message, name=name)
        self.url = url
        self.status_code = status_code


class NotFoundError(ComponentError):
    """Component or version is absent."""


class NotInstalledError(NotFoundError):
    """The ledger has no entry for (name, version)."""

    def __init__(self, name: str, version: str):
        super().__init__(f"{name} {version} is not installed", name=name, version=version)


class ActiveComponentError(ComponentError):
    """Removal of the active build was attempted without force."""

    def __init__(self, name: str, version: str):
        super().__init__(
            f"cannot remove active component {name} {version}, use --force to override",
            name=name,
            version=version,
        )


class NoActiveVersionError(ComponentError):
    """No installed build of a component is marked active."""

    def __init__(self, name: str):
        super().__init__(f"no active version for {name}", name=name)


class CorruptLedgerError(ComponentError):
    """The persisted ledger file could not be read back."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"installed components file {path} is corrupt: {reason}")
        self.path = path


class AlreadyInstalledError(ComponentError):
    """The resolved build is already present in the ledger."""

    def __init__(self, name: str, version: str):
        super().__init__(f"{name} {version} already exist", name=name, version=version)


class AlreadyLatestError(ComponentError):
    """An update was requested but the installed build is current."""

    def __init__(self, name: str, version: str):
        super().__init__(
            f"{name} {version} already with latest build", name=name, version=version
        )
