"""Unified settings: CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``ACTIVITYLIST_*`` prefix, plus ``OUTPUT_PATH``
  3. Code defaults

Uses Pydantic Settings v2. ``OUTPUT_PATH`` is read without the prefix
because it names the trace output file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

OUTPUT_PATH_ENV_VAR = "OUTPUT_PATH"


class ActivitySettings(BaseSettings):
    """Settings for the activitylist CLI.

    Frozen after construction and stored on the Click context.

    Attributes:
        output_path: Trace output file, or None to write the trace to stdout.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ACTIVITYLIST_",
        "env_ignore_empty": True,
        "populate_by_name": True,
    }

    output_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("output_path", OUTPUT_PATH_ENV_VAR),
    )

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and env vars; no dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> ActivitySettings:
        """Construct settings from a CLI invocation.

        Flags left unset (False/None) defer to env vars and defaults.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
