from __future__ import annotations

from collections.abc import Mapping

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from methods_extractor.core import constants as cs
from methods_extractor.data_models.models import ExtractorOptions
from methods_extractor.infrastructure import exceptions as ex


class ExtractorSettings(BaseSettings):
    """Extractor settings, loaded from environment variables or a .env file.

    Variables are prefixed with `METHODS_EXTRACTOR_`, for example
    `METHODS_EXTRACTOR_CACHE_MAX_ENTRIES=200`.
    """

    model_config = SettingsConfigDict(
        env_prefix=cs.ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    CACHE_MAX_ENTRIES: int = Field(default=cs.DEFAULT_CACHE_MAX_ENTRIES, ge=1)
    DEFAULT_FILENAME: str = cs.DEFAULT_FILENAME
    DEFAULT_SCRIPT_TARGET: cs.ScriptTarget = cs.DEFAULT_SCRIPT_TARGET
    LOG_LEVEL: str = cs.DEFAULT_LOG_LEVEL


settings = ExtractorSettings()


def parse_script_target(value: cs.ScriptTarget | str) -> cs.ScriptTarget:
    """Converts a script target name such as 'es2018' or 'ESNext' to the enum.

    Args:
        value (cs.ScriptTarget | str): The target, matched case-insensitively.

    Raises:
        ValueError: If the value names no known target.

    Returns:
        cs.ScriptTarget: The matching target.
    """
    if isinstance(value, cs.ScriptTarget):
        return value
    for target in cs.ScriptTarget:
        if target.value.lower() == str(value).lower():
            return target
    choices = ", ".join(target.value for target in cs.ScriptTarget)
    raise ValueError(ex.INVALID_SCRIPT_TARGET.format(value=value, choices=choices))


def normalize_options(
    options: ExtractorOptions | Mapping[str, object] | None = None,
) -> ExtractorOptions:
    """Fills in defaults for the options of an extraction.

    Args:
        options: An `ExtractorOptions`, a mapping with any of `filename`,
            `script_target` or `scriptTarget`, or None. Keys mapped to None
            take their defaults.

    Raises:
        TypeError: If `options` is of an unsupported type.
        ValueError: If the script target is unknown.

    Returns:
        ExtractorOptions: Options with every field set.
    """
    if options is None:
        return ExtractorOptions(
            filename=settings.DEFAULT_FILENAME,
            script_target=settings.DEFAULT_SCRIPT_TARGET,
        )
    if isinstance(options, ExtractorOptions):
        return options
    if not isinstance(options, Mapping):
        raise TypeError(ex.INVALID_OPTIONS.format(type=type(options).__name__))

    filename = options.get(cs.OPTION_FILENAME) or settings.DEFAULT_FILENAME
    target = options.get(cs.OPTION_SCRIPT_TARGET)
    if target is None:
        target = options.get(cs.OPTION_SCRIPT_TARGET_CAMEL)
    if target is None:
        target = settings.DEFAULT_SCRIPT_TARGET
    return ExtractorOptions(
        filename=str(filename),
        script_target=parse_script_target(str(target)),
    )
