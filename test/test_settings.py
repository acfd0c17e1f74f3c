"""Unit tests for generator settings dataclasses."""

from hello_tools.settings import FailureMode, GeneratorSettings


def test_generator_settings_defaults() -> None:
    settings = GeneratorSettings()

    assert settings.minimum == 1
    assert settings.maximum == 100
    assert settings.failure_mode is FailureMode.CLOCK


def test_generator_settings_failure_mode_from_string() -> None:
    settings = GeneratorSettings(maximum=6, failure_mode="never")  # type: ignore[arg-type]

    assert settings == GeneratorSettings(minimum=1, maximum=6, failure_mode=FailureMode.NEVER)
