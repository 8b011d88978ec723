""" Module to represent custom exceptions """

class IntegrationError(Exception):
    """Exception raised when an external job platform call fails."""
    def __init__(self, platform, message):
        super().__init__(message)

        # Store the platform (e.g., indeed, linkedin)
        self.platform = platform

    def __str__(self):
        return f"{self.platform} Error: {self.args[0]}"

class SessionError(Exception):
    """Exception raised when the current session user cannot be resolved."""
