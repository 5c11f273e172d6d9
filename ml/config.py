# ml/config.py
import os
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace

from ml.errors import InvalidArgument


@dataclass
class Settings:
    """
    Training defaults. Each field can be overridden from the environment
    with PERCEPTRON_<FIELD>, e.g. PERCEPTRON_LEARNING_RATE=0.1.
    """
    inputs: int = 4
    learning_rate: float = 0.05
    threshold: float = 0.5
    limit: int = 200


_defaults = Settings()


def _env_value(name, cast):
    raw = os.getenv(f"PERCEPTRON_{name.upper()}", "").strip()
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError:
        raise InvalidArgument(f"PERCEPTRON_{name.upper()}={raw!r} is not a valid {cast.__name__}") from None


def _check_keys(overrides):
    unknown = set(overrides) - {f.name for f in fields(Settings)}
    if unknown:
        raise AttributeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")


def configure(**overrides):
    """Change the process-wide defaults, e.g. configure(limit=500)."""
    global _defaults
    _check_keys(overrides)
    _defaults = replace(_defaults, **overrides)


@contextmanager
def config(**overrides):
    """Apply configure(...) for the duration of a with block."""
    global _defaults
    saved = _defaults
    configure(**overrides)
    try:
        yield
    finally:
        _defaults = saved


def settings(**overrides):
    """
    Effective settings: defaults, then the environment, then explicit
    overrides. Overrides that are None are ignored, so CLI options left
    unset fall through to the layers below.
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    _check_keys(overrides)
    values = {}
    for f in fields(Settings):
        env = _env_value(f.name, f.type)
        if env is not None:
            values[f.name] = env
    values.update(overrides)
    return replace(_defaults, **values)
