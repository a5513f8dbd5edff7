"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all client-level errors.

    Gateway-reported failures are returned as error results, not raised;
    these exceptions cover conditions outside the gateway's response
    contract such as transport failures or missing credentials.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
