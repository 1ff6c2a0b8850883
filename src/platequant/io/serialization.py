"""YAML serialization for image-analysis parameter sets.

Requires pyyaml. Raises ImportError with clear install instructions
if pyyaml is not available.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from platequant.measure.params import ColonyParams, ImageAnalysisParams, LaneParams


def _require_yaml() -> Any:
    """Import and return the yaml module, or raise a helpful error."""
    try:
        import yaml

        return yaml
    except ImportError:
        raise ImportError(
            "pyyaml is required for parameter file serialization. "
            "Install it with: pip install pyyaml"
        ) from None


def params_to_yaml(params: ImageAnalysisParams, path: Path) -> None:
    """Serialize image-analysis parameters to a YAML file.

    Args:
        params: The parameter set to write.
        path: File path to write.
    """
    yaml = _require_yaml()

    data: dict[str, Any] = {
        "mode": params.mode,
        "lanes": params.lanes.to_dict(),
        "colonies": params.colonies.to_dict(),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def params_from_yaml(path: Path) -> ImageAnalysisParams:
    """Deserialize image-analysis parameters from a YAML file.

    Missing sections and keys fall back to the defaults.

    Args:
        path: Path to the YAML file.

    Returns:
        A validated ImageAnalysisParams.

    Raises:
        FileNotFoundError: If the YAML file doesn't exist.
        ValueError: If the YAML is not a mapping or holds invalid values.
    """
    yaml = _require_yaml()

    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid parameter YAML: expected a mapping, got {type(data).__name__}")

    lanes_data = data.get("lanes") or {}
    colonies_data = data.get("colonies") or {}
    for section, value in (("lanes", lanes_data), ("colonies", colonies_data)):
        if not isinstance(value, dict):
            raise ValueError(f"Invalid parameter YAML: '{section}' must be a mapping")

    defaults_lanes = LaneParams()
    defaults_colonies = ColonyParams()
    lanes = LaneParams(
        lane_count=int(lanes_data.get("lane_count", defaults_lanes.lane_count)),
        control_lane=int(lanes_data.get("control_lane", defaults_lanes.control_lane)),
    )
    colonies = ColonyParams(
        threshold=int(colonies_data.get("threshold", defaults_colonies.threshold)),
        min_area=int(colonies_data.get("min_area", defaults_colonies.min_area)),
    )

    return ImageAnalysisParams(
        mode=str(data.get("mode", "lanes")),
        lanes=lanes,
        colonies=colonies,
    )
