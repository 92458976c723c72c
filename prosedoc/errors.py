"""Exceptions raised while building documents."""


class ProseError(Exception):
    """Base class for all prosedoc errors."""


class ConfigurationError(ProseError, ValueError):
    """An option, model or setting combination is structurally invalid."""


class StageError(ProseError, RuntimeError):
    """A collaborator stage failed while building a document.

    Attributes:
        stage: Name of the failing stage (segment, tokenize, tag or extract)
        cause: The exception raised by the collaborator
    """

    def __init__(self, stage: str, cause: BaseException):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage} stage failed: {cause}")
