class DockdashError(Exception):
    """
    Base class for every error raised by dockdash
    """


class ConfigError(DockdashError):
    """
    Raised when an environment option cannot be converted to the expected type
    """


class UnhandledFieldKind(DockdashError):
    """
    Raised when a field kind outside of FieldKind is asked to be formatted. Callers log it and fall back to an empty
    string so that a single unsupported field never aborts the dashboard.
    """

    def __init__(self, kind):
        super().__init__(f"Unhandled field kind {kind!r}")
        self.kind = kind


class ClientNotConnected(DockdashError):
    """
    Raised when the DockerDaemonClient is used before `connect` succeeded
    """
