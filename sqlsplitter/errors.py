class SplitterError(Exception):
    pass

class InputNotFoundError(SplitterError):
    pass

class ZipExistsError(SplitterError):
    pass

class TruncatedUseStatementError(SplitterError):
    """A USE statement was the last line of the input, with no GO after it
    """
    pass
