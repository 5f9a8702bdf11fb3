"""Error types raised while building the ServiceConfig."""

from pydantic import ValidationError

from safety_eval.core.errors import SafetyEvalError

ENVIRONMENT_SOURCE = "environment"


class ConfigError(SafetyEvalError):
    """Raised when no usable ServiceConfig can be built from *source*.

    ``source`` is the YAML file path, or ``"environment"``.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Failed to load config from {source}: {reason}")


class ConfigLoadError(ConfigError):
    """The YAML file is missing, unreadable, or not valid YAML."""


class MissingEnvVarsError(ConfigError):
    """Environment variables the config needs are unset; all of them are listed."""

    def __init__(self, source: str, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        names = ", ".join(sorted(missing_vars))
        super().__init__(source, f"missing environment variables: {names}")


class ConfigValidationError(ConfigError):
    """The raw values do not satisfy the ServiceConfig schema."""

    def __init__(self, source: str, error: ValidationError) -> None:
        self.fields = [
            ".".join(str(loc) for loc in detail["loc"]) for detail in error.errors()
        ]
        problems = "; ".join(
            f"{field or '<root>'}: {detail['msg']}"
            for field, detail in zip(self.fields, error.errors())
        )
        super().__init__(source, f"invalid values: {problems}")
