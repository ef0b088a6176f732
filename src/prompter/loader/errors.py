"""Question file error types."""


class QuestionFileError(Exception):
    """Raised when a question file cannot be turned into questions."""

    def __init__(
        self, message: str, index: int | None = None, key: str | None = None
    ):
        self.index = index
        self.key = key
        if index is not None:
            where = f"question {index}" + (f" ({key!r})" if key else "")
            message = f"{where}: {message}"
        super().__init__(message)
