"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for venue map failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration or dataset files."""

    error_code = "CONFIG_ERROR"


class ContractError(PipelineError):
    """Raised when emitted geometry breaks the output contract."""

    error_code = "CONTRACT_ERROR"


class StageError(PipelineError):
    """Raised for stage failures that should halt in strict mode."""

    error_code = "STAGE_ERROR"
