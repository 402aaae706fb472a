class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when the file pipeline fails for a reason other than the import itself."""


class TreeImportError(PipelineError):
    """
    Terminal outcome of a single import call.

    ``kind`` is a stable classification for callers, ``message`` is the
    human-readable text shown to the end user.
    """

    kind = "import_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(TreeImportError):
    kind = "empty_input"

    def __init__(self, message: str = "Input is empty."):
        super().__init__(message)


class NoValidEntriesError(TreeImportError):
    kind = "no_valid_entries"

    def __init__(self, message: str = "No valid NAME entries found in the input."):
        super().__init__(message)


class SerializationFailureError(TreeImportError):
    kind = "serialization_failure"

    def __init__(self, reason: str):
        super().__init__(f"Failed to generate JSON: {reason}")
        self.reason = reason
