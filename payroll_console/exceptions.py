class ConsoleError(Exception):
    """Base class for errors raised by the payroll console."""


class NetworkError(ConsoleError):
    """An employee API call failed: transport error, non-2xx or bad payload."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code

# Precondition failures on the selection ("select exactly one employee")
# are not exceptions; they are WARNING notifications from the console.
