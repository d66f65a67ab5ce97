"""Runner settings, read from ``HORNET_*`` environment variables.

Usage:
    from hornet.config import RunnerSettings

    settings = RunnerSettings.from_env()
    settings = RunnerSettings(samples_per_run=20)
"""

from pydantic import BaseModel, Field, model_validator

from hornet.models.constants import (
    DEFAULT_COOLDOWN_SECONDS,
    DEFAULT_SAMPLES_PER_RUN,
    DEFAULT_SETTLE_SECONDS,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    RUNNER_QUERY_MARKER,
    DelayClass,
)
from hornet.utils.env import get_env


class RunnerSettings(BaseModel):
    """Tunables of the suite runner."""

    settle_seconds: float = Field(
        DEFAULT_SETTLE_SECONDS,
        ge=0,
        description="Pause between successful orchestration steps",
    )
    cooldown_seconds: float = Field(
        DEFAULT_COOLDOWN_SECONDS,
        ge=0,
        description="Pause after an abort before the next context opens",
    )
    viewport_width: int = Field(DEFAULT_VIEWPORT_WIDTH, gt=0)
    viewport_height: int = Field(DEFAULT_VIEWPORT_HEIGHT, gt=0)
    samples_per_run: int = Field(
        DEFAULT_SAMPLES_PER_RUN, ge=1, description="Timing samples per run"
    )
    query_marker: str = Field(
        RUNNER_QUERY_MARKER,
        min_length=1,
        description="Query appended to a benchmark path when runner-driven",
    )

    @model_validator(mode="after")
    def check_cooldown(self) -> "RunnerSettings":
        if self.cooldown_seconds < self.settle_seconds:
            raise ValueError(
                f"cooldown_seconds ({self.cooldown_seconds}) must not be shorter "
                f"than settle_seconds ({self.settle_seconds})"
            )
        return self

    @property
    def delays(self) -> dict[DelayClass, float]:
        return {
            DelayClass.SETTLE: self.settle_seconds,
            DelayClass.COOLDOWN: self.cooldown_seconds,
        }

    @classmethod
    def from_env(cls, **overrides: object) -> "RunnerSettings":
        """Build settings from the environment; keyword overrides win.

        Raises:
            EnvVarTypeError: If a variable cannot be converted.
            pydantic.ValidationError: If a value is out of range.
        """
        values: dict[str, object] = {
            "settle_seconds": get_env(
                "HORNET_SETTLE_SECONDS", default=DEFAULT_SETTLE_SECONDS, as_type=float
            ),
            "cooldown_seconds": get_env(
                "HORNET_COOLDOWN_SECONDS",
                default=DEFAULT_COOLDOWN_SECONDS,
                as_type=float,
            ),
            "viewport_width": get_env(
                "HORNET_VIEWPORT_WIDTH", default=DEFAULT_VIEWPORT_WIDTH, as_type=int
            ),
            "viewport_height": get_env(
                "HORNET_VIEWPORT_HEIGHT", default=DEFAULT_VIEWPORT_HEIGHT, as_type=int
            ),
            "samples_per_run": get_env(
                "HORNET_SAMPLES", default=DEFAULT_SAMPLES_PER_RUN, as_type=int
            ),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
