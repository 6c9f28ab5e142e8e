class ContactError(Exception):
    """Base class for contact relay errors."""


class ConfigurationError(ContactError):
    """A destination is missing the settings it needs to run."""


class RemoteSubmissionError(ContactError):
    """The remote contact endpoint rejected a submission."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
