class BipartiteFlowError(Exception):
    pass


class InvalidArgumentError(BipartiteFlowError, ValueError):
    pass


class OutOfRangeError(BipartiteFlowError, IndexError):
    pass


class InputFormatError(BipartiteFlowError, ValueError):
    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def describe(error):
    """Message of `error`, extended by the message of its cause."""
    if error.__cause__ is not None:
        return f"{error}: {error.__cause__}"
    return str(error)
