"""Parameter file loading and saving."""

import json
from pathlib import Path
from typing import Union

import yaml

from galaxy_points.generator.parameters import GalaxyParameters

PathLike = Union[str, Path]


def load_parameters(config_path: PathLike) -> GalaxyParameters:
    """Load generation parameters from file.

    Keys match the :class:`GalaxyParameters` fields; missing keys take
    their defaults.

    Args:
        config_path: Path to config file (.json, .yaml or .yml)

    Returns:
        Validated GalaxyParameters

    Raises:
        ValueError: If the file type is unsupported or does not hold a mapping
        InvalidParameterError: If a value is invalid
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping of parameter names to values")
    return GalaxyParameters.from_dict(data)


def save_parameters(params: GalaxyParameters, output_path: PathLike):
    """Save generation parameters to file.

    Args:
        params: Parameters to write
        output_path: Output file path (.json, .yaml or .yml)
    """
    output_path = Path(output_path)
    data = params.to_dict()

    if output_path.suffix in ('.yaml', '.yml'):
        with open(output_path, 'w') as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
    elif output_path.suffix == '.json':
        with open(output_path, 'w') as f:
            json.dump(data, f, indent=2)
    else:
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
