# ml/errors.py


class PerceptronError(Exception):
    """Base error for perceptron training and inference."""

    def __init__(self, message="", code=None, details=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class InvalidArgument(PerceptronError, ValueError):
    """Bad construction parameter, training option or dataset row."""

    def __init__(self, message="", **kw):
        super().__init__(message, code=kw.get("code", "invalid_argument"), details=kw.get("details"))


class DimensionMismatch(PerceptronError, ValueError):
    """Input length differs from the weight vector; details carry expected/actual."""

    def __init__(self, expected, actual, message=None):
        if message is None:
            message = f"Expected input of length {expected}, got {actual}"
        super().__init__(message, code="dimension_mismatch",
                         details={"expected": int(expected), "actual": int(actual)})
        self.expected = int(expected)
        self.actual = int(actual)
