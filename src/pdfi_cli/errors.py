# src/pdfi_cli/errors.py


class PdfiError(Exception):
    """Base class for every failure reported by pdfi."""


class ParseError(PdfiError):
    """The document structure could not be read."""


class MalformedAddressError(PdfiError, ValueError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Malformed object address: {token!r}")
        self.token = token


class ReferenceNotFoundError(PdfiError, LookupError):
    def __init__(self, address: object) -> None:
        super().__init__(f"Object {address} not found")
        self.address = address


class DecodeError(PdfiError):
    """A stream's filter chain could not be decoded."""


class UnknownCommandError(PdfiError, LookupError):
    def __init__(self, command_id: str) -> None:
        super().__init__(f'Unrecognized command: "{command_id}"')
        self.command_id = command_id


class MissingArgumentError(PdfiError, ValueError):
    """The invocation lacks a filename or required positional arguments."""


class ClosedError(PdfiError, ValueError):
    """A read was attempted on a closed byte source."""
