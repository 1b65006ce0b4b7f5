import json
from pathlib import Path

from pytest import fixture

from vicforcing.core import CellContext, ForcingConstants


@fixture
def context() -> CellContext:
    return CellContext()


@fixture
def consistent_constants() -> ForcingConstants:
    """Constants under which cloud cover and shortwave estimates invert each
    other exactly."""
    return ForcingConstants(cloud_attenuation_scale=1.0, measured_shortwave_uses_i0=False)


@fixture
def constants_json(tmp_path: Path) -> Path:
    path = tmp_path / "constants.json"
    path.write_text(json.dumps({"solar_time_offset": 1.0, "lwave_cor": 1.2}))
    return path


@fixture
def daily_record() -> dict:
    """Five days of extremes at fixed hours."""
    return {
        "tmin_hour": [6, 6, 5, 6, 7],
        "tmin": [5.0, 6.0, 4.0, 7.0, 8.0],
        "tmax_hour": [15, 14, 16, 15, 14],
        "tmax": [20.0, 22.0, 19.0, 25.0, 24.0],
    }
