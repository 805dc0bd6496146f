"""Exception hierarchy for prompt registration, invocation and completion."""

from __future__ import annotations


class PromptServerError(Exception):
    """Base exception for all prompt registry errors."""


class NotFoundError(PromptServerError):
    """Unknown prompt name, or unknown argument within a known prompt."""

    def __init__(self, name: str, argument_name: str | None = None) -> None:
        self.name = name
        self.argument_name = argument_name
        if argument_name is None:
            message = f"Unknown prompt: {name!r}"
        else:
            message = f"Unknown argument {argument_name!r} for prompt {name!r}"
        super().__init__(message)


class MissingArgumentError(PromptServerError):
    """A required argument was not supplied."""

    def __init__(self, argument_name: str) -> None:
        self.argument_name = argument_name
        super().__init__(f"Missing required argument: {argument_name!r}")


class InvalidValueError(PromptServerError):
    """A supplied value does not satisfy its argument schema."""

    def __init__(
        self,
        argument_name: str,
        value: object,
        allowed_values: tuple[str, ...] = (),
    ) -> None:
        self.argument_name = argument_name
        self.value = value
        self.allowed_values = allowed_values
        if allowed_values:
            expected = ", ".join(repr(v) for v in allowed_values)
            message = (
                f"Invalid value {value!r} for argument {argument_name!r}. "
                f"Expected one of: {expected}"
            )
        else:
            message = f"Invalid value {value!r} for argument {argument_name!r}"
        super().__init__(message)


class DuplicateNameError(PromptServerError):
    """A prompt with the same name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate prompt name: {name!r}")


class RenderError(PromptServerError):
    """The renderer could not produce messages for a resolved mapping."""

    def __init__(self, prompt_name: str, reason: str) -> None:
        self.prompt_name = prompt_name
        self.reason = reason
        super().__init__(f"Failed to render prompt {prompt_name!r}: {reason}")


class RegistryFrozenError(RuntimeError):
    """Registration attempted after the registry left its initialization phase."""
