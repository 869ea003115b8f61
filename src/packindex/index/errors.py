class IndexLoadError(Exception):
    """Fatal failure while loading an index, before any entry is checked."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path
        self.message = message


class ReadError(IndexLoadError):
    pass


class ParseError(IndexLoadError):
    pass


class ShapeError(IndexLoadError):
    pass
