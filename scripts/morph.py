"""Morph script: YAML morph job → YAML frames file.

Runs one morph job end to end:
    1. Load and validate the job (morph_job.v1)
    2. Align source and target buffers
    3. frames == 1: single interpolate() call with the job weights
       frames > 1:  morph_frames() tween, weights used as per-point profile
    4. Validate and write frames atomically (morph_frames.v1)

Refactored architecture:
    - morph_main(job_path, output_path) → dict
        * Callable function (used by tests and batch drivers)
        * Returns: {output_path, frame_count, point_count}
    - CLI entry point: if __name__ == "__main__"

Output path resolution (first match wins):
    - explicit output_path / --output
    - ``output`` field of the job, relative to the job file
    - <job_dir>/<job_stem>_frames.yaml

CLI:
    python scripts/morph.py --job jobs/wave.yaml
    python scripts/morph.py --job jobs/wave.yaml --output out/wave.yaml \\
                            --log-level DEBUG --json-logs
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pathmorph.animation import morph_frames
from pathmorph.buffers import align, interpolate
from pathmorph.utils import fs, validators
from pathmorph.utils.logging_config import (
    install_excepthook,
    pop_context,
    push_context,
    setup_logging,
    shutdown,
)

logger = logging.getLogger(__name__)


def _resolve_output_path(
    job_path: Path,
    job: validators.MorphJobV1,
    output_path: Optional[Union[str, Path]]
) -> Path:
    if output_path is not None:
        return Path(output_path)
    if job.output:
        out = Path(job.output)
        return out if out.is_absolute() else job_path.parent / out
    return job_path.parent / f"{job_path.stem}_frames.yaml"


def morph_main(
    job_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """Run a morph job and write its frames.

    Parameters
    ----------
    job_path : Union[str, Path]
        Path to a morph_job.v1 YAML file
    output_path : Union[str, Path], optional
        Override for the frames file location

    Returns
    -------
    Dict[str, Any]
        - output_path: str
        - frame_count: int
        - point_count: int

    Raises
    ------
    FileNotFoundError
        If the job file is missing
    ValueError
        If the job fails schema validation, or buffers / weights / easing are
        rejected by the core (PointBufferError is a ValueError)
    """
    job_path = Path(job_path)
    job = validators.load_morph_job(job_path)
    job_name = job.name or job_path.stem

    push_context(job=job_name)
    try:
        logger.info(
            "Morphing %d → %d points over %d frame(s)",
            len(job.source) // 2, len(job.target) // 2, job.frames
        )

        if job.frames == 1:
            frames = [interpolate(job.source, job.target, job.weights)]
        else:
            frames = morph_frames(
                job.source, job.target, job.frames,
                easing=job.easing, weights=job.weights
            )

        point_count = frames[0].point_count
        payload = validators.MorphFramesV1(
            schema="morph_frames.v1",
            name=job_name,
            point_count=point_count,
            frame_count=len(frames),
            frames=[frame.to_list() for frame in frames],
        )

        out_path = _resolve_output_path(job_path, job, output_path)
        fs.atomic_yaml_dump(payload.model_dump(by_alias=True), out_path)
        logger.info("Wrote %d frame(s) to %s", len(frames), out_path)
    finally:
        pop_context(keys=["job"])

    return {
        "output_path": str(out_path),
        "frame_count": len(frames),
        "point_count": point_count,
    }


def preview_alignment(job_path: Union[str, Path]) -> Dict[str, int]:
    """Point counts before and after alignment, without writing anything."""
    job = validators.load_morph_job(job_path)
    pair = align(job.source, job.target)
    return {
        "source_points": len(job.source) // 2,
        "target_points": len(job.target) // 2,
        "aligned_points": pair.point_count,
    }


def main(argv: Optional[list] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Morph between two polylines and write the frames as YAML"
    )
    parser.add_argument(
        "--job",
        type=str,
        required=True,
        help="Path to morph job (morph_job.v1 YAML)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output frames file (default: from job, or <job>_frames.yaml)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only report point counts before/after alignment",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Optional log file path",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit JSON-lines logs",
    )

    args = parser.parse_args(argv)

    setup_logging(
        log_level=args.log_level,
        log_file=args.log_file,
        json=args.json_logs,
        context={"app": "morph"},
    )
    install_excepthook()

    try:
        if args.dry_run:
            counts = preview_alignment(args.job)
            print(
                f"source={counts['source_points']} target={counts['target_points']} "
                f"aligned={counts['aligned_points']}"
            )
            return 0
        result = morph_main(args.job, args.output)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Morph job failed: %s", e)
        return 1
    finally:
        shutdown()

    print("\n=== Morph Complete ===")
    print(f"Frames: {result['frame_count']} x {result['point_count']} points")
    print(f"Output: {result['output_path']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
