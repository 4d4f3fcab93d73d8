"""Mapper configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from jsonapi_orm.adapters.jsonapi.casing import KeyCase

from .env import env_flag, load_env_file, optional_env_var
from .errors import InvalidConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

KEY_CASE_ENV: Final[str] = "JSONAPI_ORM_KEY_CASE"
COERCE_ATTRIBUTES_ENV: Final[str] = "JSONAPI_ORM_COERCE_ATTRIBUTES"


@dataclass(frozen=True, slots=True)
class OrmConfig:
    """How wire documents are translated into entities."""

    key_case: KeyCase = KeyCase.UNDERSCORE
    coerce_attributes: bool = True


def get_orm_config(*, env_file: Path | None = None) -> OrmConfig:
    if env_file is not None:
        load_env_file(env_file)

    key_case = KeyCase.UNDERSCORE
    raw_case = optional_env_var(KEY_CASE_ENV)
    if raw_case is not None:
        try:
            key_case = KeyCase(raw_case.lower())
        except ValueError as exc:
            choices = ", ".join(case.value for case in KeyCase)
            raise InvalidConfigurationError(
                f"Invalid {KEY_CASE_ENV}: {raw_case!r} (expected one of: {choices})",
                name=KEY_CASE_ENV,
            ) from exc

    return OrmConfig(
        key_case=key_case,
        coerce_attributes=env_flag(COERCE_ATTRIBUTES_ENV, default=True),
    )
