class MockKataError(Exception):
    pass


class InvalidArgumentError(MockKataError, ValueError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class CatalogError(MockKataError):
    pass


class CatalogNotFoundError(CatalogError):
    pass


class CatalogParseError(CatalogError):
    pass
