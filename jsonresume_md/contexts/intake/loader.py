"""
Resume file loading.

Reads a JSON Resume document from disk. JSON files are decoded with the json
module; YAML files go through OmegaConf (interpolation is not resolved, so
literal "${...}" text in a resume survives untouched).
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from loguru import logger
from omegaconf import OmegaConf

from jsonresume_md.contexts.rendering.exceptions import ResumeLoadError

YAML_SUFFIXES = {".yaml", ".yml"}


def load_resume_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a resume document from a JSON or YAML file.

    Args:
        path: Path to resume.json / resume.yaml

    Returns:
        Decoded resume document as a plain dict

    Raises:
        ResumeLoadError: If the file is missing, cannot be decoded, or its root
            is not a mapping
    """
    if isinstance(path, str):
        path = Path(path)

    if not path.exists():
        raise ResumeLoadError("Resume file not found", path=path)

    logger.debug(f"[intake] Loading resume from {path}")

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
        else:
            data = json.loads(path.read_text(encoding="utf-8"))
    except Exception as e:
        raise ResumeLoadError("Could not decode resume file", path=path, original_error=e) from e

    if not isinstance(data, dict):
        raise ResumeLoadError(
            f"Resume root must be an object, got {type(data).__name__}", path=path
        )

    return data
