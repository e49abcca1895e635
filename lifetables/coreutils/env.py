from dotenv import load_dotenv
import os

load_dotenv()  # take environment variables from .env


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def env_get_float(key: str, default: float) -> float:
    """Get environment variable as a float, falling back to default when unset."""
    value = env_get(key)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(
            f"Environment variable {key} must be a number, got {value!r}"
        ) from e
