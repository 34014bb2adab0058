class PaymentProviderNotConfigured(Exception):
    pass


class PaymentProviderError(Exception):
    """The provider answered with an error status."""

    def __init__(self, message, status_code=None, details=None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
