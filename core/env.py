from pydantic import ValidationError

from models.env import EnvConfig

__all__ = [
    "EnvConfig",
    "EnvConfigError",
    "load_env",
]


class EnvConfigError(ValueError):
    """
    Custom exception for environment configuration errors.
    """

    pass


def load_env() -> EnvConfig:
    """
    Load and validate environment variables.

    Values come from the process environment first, then from a .env
    file in the current working directory if one exists.

    Returns:
        EnvConfig: Validated environment configuration object

    Raises:
        EnvConfigError: If any environment variable is invalid
    """
    try:
        return EnvConfig()
    except ValidationError as e:
        fields = sorted(
            {str(error["loc"][0]).upper() for error in e.errors() if error["loc"]}
        )
        raise EnvConfigError(
            f"Invalid environment configuration ({', '.join(fields)}): {e}"
        ) from e
