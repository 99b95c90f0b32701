"""YAML schema validation for morph jobs and frame files.

Centralized pydantic models so every entrypoint fails fast with actionable
messages (offending key, index, expected range):
    - Morph job schema (morph_job.v1): source/target buffers, weights,
      frame count, easing, output path
    - Frames schema (morph_frames.v1): output of a morph job

Coordinates are flat [x0, y0, x1, y1, ...] lists, same layout as
pathmorph.buffers.PointBuffer. Weights live in [0.0, 1.0].

Usage:
    from pathmorph.utils import validators

    job = validators.load_morph_job("jobs/wave.yaml")
    frames = validators.validate_frames_file("out/wave_frames.yaml")
"""

from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import fs


def _check_flat_coords(v: List[float], field: str) -> List[float]:
    if len(v) < 2 or len(v) % 2 != 0:
        raise ValueError(
            f"{field} must hold an even number (>= 2) of coordinates, got {len(v)}"
        )
    return v


# ============================================================================
# MORPH JOB SCHEMA V1
# ============================================================================

class MorphJobV1(BaseModel):
    """Single morph job (morph_job.v1.yaml schema).

    ``frames == 1`` produces one interpolated buffer; ``frames > 1`` produces
    a tween where ``weights`` acts as a per-point profile.
    """
    model_config = ConfigDict(populate_by_name=True, extra="forbid", allow_inf_nan=False)

    schema_version: str = Field("morph_job.v1", alias="schema", description="Schema version")
    name: Optional[str] = Field(None, description="Job label used in logs")
    source: List[float] = Field(..., description="Start buffer, flat coordinates")
    target: List[float] = Field(..., description="End buffer, flat coordinates")
    weights: Union[float, List[float]] = Field(0.5, description="Blend weight(s) in [0, 1]")
    frames: int = Field(1, ge=1, le=100_000, description="Number of output frames")
    easing: str = Field("linear", description="Easing curve for tweens")
    output: Optional[str] = Field(None, description="Output path, relative to the job file")

    @field_validator("schema_version")
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "morph_job.v1":
            raise ValueError(f"Expected schema 'morph_job.v1', got '{v}'")
        return v

    @field_validator("source", "target")
    @classmethod
    def validate_coords(cls, v: List[float], info) -> List[float]:
        return _check_flat_coords(v, info.field_name)

    @field_validator("weights")
    @classmethod
    def validate_weights(cls, v: Union[float, List[float]]) -> Union[float, List[float]]:
        values = v if isinstance(v, list) else [v]
        if not values:
            raise ValueError("weights list must not be empty")
        for i, w in enumerate(values):
            if not 0.0 <= w <= 1.0:
                raise ValueError(f"weights[{i}]={w} out of range [0, 1]")
        return v


# ============================================================================
# MORPH FRAMES SCHEMA V1
# ============================================================================

class MorphFramesV1(BaseModel):
    """Output of a morph job: ``frame_count`` buffers of ``point_count`` points."""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    schema_version: str = Field("morph_frames.v1", alias="schema", description="Schema version")
    name: Optional[str] = None
    point_count: int = Field(..., ge=1)
    frame_count: int = Field(..., ge=1)
    frames: List[List[float]] = Field(..., description="Flat coordinates per frame")

    @field_validator("schema_version")
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "morph_frames.v1":
            raise ValueError(f"Expected schema 'morph_frames.v1', got '{v}'")
        return v

    @model_validator(mode="after")
    def validate_frame_shapes(self) -> "MorphFramesV1":
        if len(self.frames) != self.frame_count:
            raise ValueError(
                f"frame_count={self.frame_count} but {len(self.frames)} frames present"
            )
        expected = 2 * self.point_count
        for i, frame in enumerate(self.frames):
            if len(frame) != expected:
                raise ValueError(
                    f"Frame {i} has {len(frame)} coordinates, expected {expected}"
                )
        return self


# ============================================================================
# PUBLIC API
# ============================================================================

def load_morph_job(path: Union[str, Path]) -> MorphJobV1:
    """Load and validate a morph job from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to a morph_job.v1 YAML file

    Returns
    -------
    MorphJobV1
        Validated job

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (message names the file and the offending field)
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Morph job not found: {path}")

    data = fs.load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Morph job at {path} must be a YAML mapping, got {type(data).__name__}")
    try:
        return MorphJobV1(**data)
    except Exception as e:
        raise ValueError(f"Morph job validation failed at {path}: {e}") from e


def validate_frames_file(path: Union[str, Path]) -> MorphFramesV1:
    """Load and validate a morph_frames.v1 YAML file.

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Frames file not found: {path}")

    data = fs.load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Frames file at {path} must be a YAML mapping, got {type(data).__name__}")
    try:
        return MorphFramesV1(**data)
    except Exception as e:
        raise ValueError(f"Frames file validation failed at {path}: {e}") from e
