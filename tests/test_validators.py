"""Test YAML schema validation and atomic filesystem helpers.

Tests for pathmorph.utils.validators:
    - Load a valid morph job (defaults filled in, alias "schema")
    - Reject invalid jobs with the offending field in the message
    - MorphFramesV1 count/shape consistency
    - validate_frames_file() on written output

Tests for pathmorph.utils.fs:
    - atomic_yaml_dump / load_yaml roundtrip, key order preserved
    - No temporary file left behind
    - Missing file / malformed YAML

Run:
    pytest tests/test_validators.py -v
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from pathmorph.utils import fs, validators


def _write_job(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "job.yaml"
    path.write_text(text)
    return path


VALID_JOB = """\
schema: morph_job.v1
name: wave
source: [0, 0, 10, 0]
target: [0, 0, 5, 5, 10, 10]
weights: 0.5
frames: 12
easing: smoothstep
"""


# ============================================================================
# MORPH JOB
# ============================================================================

def test_load_valid_job(tmp_path):
    job = validators.load_morph_job(_write_job(tmp_path, VALID_JOB))
    assert job.schema_version == "morph_job.v1"
    assert job.name == "wave"
    assert job.source == [0.0, 0.0, 10.0, 0.0]
    assert job.frames == 12
    assert job.easing == "smoothstep"
    assert job.output is None


def test_job_defaults(tmp_path):
    job = validators.load_morph_job(
        _write_job(tmp_path, "source: [0, 0, 1, 1]\ntarget: [2, 2]\n")
    )
    assert job.weights == 0.5
    assert job.frames == 1
    assert job.easing == "linear"
    assert job.name is None


def test_job_weight_list(tmp_path):
    job = validators.load_morph_job(
        _write_job(tmp_path, "source: [0, 0]\ntarget: [1, 1]\nweights: [0.0, 0.25, 1.0]\n")
    )
    assert job.weights == [0.0, 0.25, 1.0]


def test_missing_job_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Morph job not found"):
        validators.load_morph_job(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("schema: morph_job.v2\nsource: [0, 0]\ntarget: [1, 1]\n", "morph_job.v1"),
        ("source: [0, 0, 1]\ntarget: [1, 1]\n", "source"),
        ("source: [0, 0]\ntarget: []\n", "target"),
        ("source: [0, 0]\ntarget: [1, 1]\nweights: 1.5\n", "out of range"),
        ("source: [0, 0]\ntarget: [1, 1]\nweights: [0.5, -0.1]\n", "weights[1]"),
        ("source: [0, 0]\ntarget: [1, 1]\nweights: []\n", "must not be empty"),
        ("source: [0, 0]\ntarget: [1, 1]\nframes: 0\n", "frames"),
        ("source: [0, .nan]\ntarget: [1, 1]\n", "source"),
        ("source: [0, 0]\ntarget: [1, 1]\ncolour: red\n", "colour"),
        ("target: [1, 1]\n", "source"),
    ],
)
def test_invalid_job(tmp_path, text, fragment):
    path = _write_job(tmp_path, text)
    with pytest.raises(ValueError, match="validation failed") as excinfo:
        validators.load_morph_job(path)
    assert fragment in str(excinfo.value)
    assert str(path) in str(excinfo.value)


def test_job_must_be_mapping(tmp_path):
    with pytest.raises(ValueError, match="YAML mapping"):
        validators.load_morph_job(_write_job(tmp_path, "- 1\n- 2\n"))


# ============================================================================
# MORPH FRAMES
# ============================================================================

def test_frames_model_valid():
    frames = validators.MorphFramesV1(
        schema="morph_frames.v1", point_count=2, frame_count=2,
        frames=[[0, 0, 1, 1], [2, 2, 3, 3]],
    )
    assert frames.model_dump(by_alias=True)["schema"] == "morph_frames.v1"


def test_frames_count_mismatch():
    with pytest.raises(ValidationError, match="frame_count=3"):
        validators.MorphFramesV1(point_count=1, frame_count=3, frames=[[0, 0]])


def test_frames_shape_mismatch():
    with pytest.raises(ValidationError, match="Frame 1 has 4 coordinates"):
        validators.MorphFramesV1(point_count=1, frame_count=2, frames=[[0, 0], [0, 0, 1, 1]])


def test_validate_frames_file(tmp_path):
    path = tmp_path / "out" / "frames.yaml"
    fs.atomic_yaml_dump(
        {"schema": "morph_frames.v1", "point_count": 1, "frame_count": 1, "frames": [[1.5, 2.5]]},
        path,
    )
    frames = validators.validate_frames_file(path)
    assert frames.frames == [[1.5, 2.5]]


def test_validate_frames_file_rejects_bad_schema(tmp_path):
    path = tmp_path / "frames.yaml"
    fs.atomic_yaml_dump(
        {"schema": "something_else", "point_count": 1, "frame_count": 1, "frames": [[0, 0]]},
        path,
    )
    with pytest.raises(ValueError, match="Frames file validation failed"):
        validators.validate_frames_file(path)


# ============================================================================
# FS
# ============================================================================

def test_yaml_roundtrip_preserves_order(tmp_path):
    path = tmp_path / "nested" / "data.yaml"
    data = {"zeta": 1, "alpha": [1.0, 2.5], "mid": {"b": "x", "a": None}}
    fs.atomic_yaml_dump(data, path)

    assert fs.load_yaml(path) == data
    assert list(fs.load_yaml(path).keys()) == ["zeta", "alpha", "mid"]
    assert not path.with_suffix(".yaml.tmp").exists()


def test_atomic_write_text_overwrites(tmp_path):
    path = tmp_path / "note.txt"
    fs.atomic_write_text(path, "first")
    fs.atomic_write_text(path, "second")
    assert path.read_text() == "second"


def test_ensure_dir(tmp_path):
    target = fs.ensure_dir(tmp_path / "a" / "b")
    assert target.is_dir()
    assert fs.ensure_dir(target) == target


def test_load_yaml_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        fs.load_yaml(tmp_path / "missing.yaml")


def test_load_yaml_malformed(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("key: [unclosed\n")
    with pytest.raises(yaml.YAMLError, match="bad.yaml"):
        fs.load_yaml(path)
