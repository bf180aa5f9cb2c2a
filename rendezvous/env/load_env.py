import os
from typing import Callable, Dict, TypeVar, Union

from dotenv import dotenv_values
from pydantic import BaseModel

from .env import Env

T = TypeVar("T", bound=BaseModel)

PrimaryType = Union[str, int, bool, float, bytes]


def _read_environment(
    envars: Dict[str, Callable[[str], PrimaryType]],
) -> Dict[str, PrimaryType]:
    values: Dict[str, PrimaryType] = {}
    for envar_name, envar_type in envars.items():
        envar_value = os.getenv(envar_name)
        if envar_value:
            values[envar_name] = envar_type(envar_value)

    return values


def _read_env_file(
    env_file: str,
    envars: Dict[str, Callable[[str], PrimaryType]],
) -> Dict[str, PrimaryType]:
    values: Dict[str, PrimaryType] = {}
    if not os.path.exists(env_file):
        return values

    for envar_name, envar_value in dotenv_values(dotenv_path=env_file).items():
        envar_type = envars.get(envar_name)

        # Unknown keys and bare "KEY" lines without a value are skipped
        if envar_type and envar_value is not None:
            values[envar_name] = envar_type(envar_value)

    return values


def load_env(
    default: type[Env],
    env_file: str | None = None,
    override: T | None = None,
) -> T:
    """
    Build settings from the process environment, then an env file, then
    an explicit override model, each layer replacing the one before.

    The env file defaults to ".env" in the working directory and is
    ignored when it does not exist.
    """
    envars = default.types_map()

    if env_file is None:
        env_file = ".env"

    values = _read_environment(envars)
    values.update(_read_env_file(env_file, envars))

    if override:
        values.update(**override.model_dump(exclude_none=True))

        return type(override)(
            **{name: value for name, value in values.items() if value is not None}
        )

    return default(
        **{name: value for name, value in values.items() if value is not None}
    )
