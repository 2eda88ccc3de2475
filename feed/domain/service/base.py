"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services coordinate repositories and carry the logging spans;
    the records themselves have no behaviour.
    """

    pass
