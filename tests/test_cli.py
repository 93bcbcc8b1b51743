from __future__ import annotations

import json
from pathlib import Path

import pytest
import trimesh

from slice_volume.cli import main
from slice_volume.parameters import EstimationParameters, load_parameters


@pytest.fixture
def cube_path(tmp_path: Path) -> Path:
    cube = trimesh.creation.box(extents=(2.0, 2.0, 2.0))
    path = tmp_path / "cube.stl"
    cube.export(path)
    return path


def test_cli_prints_volume_and_writes_metadata(cube_path: Path, tmp_path: Path, capsys):
    metadata_path = tmp_path / "volume.json"
    status = main(
        [
            str(cube_path),
            "--elevation",
            "0.0",
            "--slices",
            "10",
            "--up-axis",
            "z",
            "--metadata",
            str(metadata_path),
        ]
    )
    assert status == 0
    assert capsys.readouterr().out.strip() == "4.000000"

    metadata = json.loads(metadata_path.read_text())
    assert metadata["volume"] == pytest.approx(4.0)
    assert metadata["slice_count"] == 10
    assert metadata["up_axis"] == "z"
    assert metadata["min_elevation"] == pytest.approx(-1.0)
    assert metadata["max_elevation"] == pytest.approx(0.0)


def test_cli_reads_parameter_file(cube_path: Path, tmp_path: Path, capsys):
    params_path = tmp_path / "params.json"
    params_path.write_text(json.dumps({"slice_count": 5, "up_axis": "z"}))
    status = main([str(cube_path), "--elevation", "3.0", "--params", str(params_path)])
    assert status == 0
    assert float(capsys.readouterr().out) == pytest.approx(8.0)


def test_cli_flags_override_parameter_file(cube_path: Path, tmp_path: Path, capsys):
    params_path = tmp_path / "params.json"
    params_path.write_text(json.dumps({"slice_count": 5, "up_axis": "x"}))
    metadata_path = tmp_path / "volume.json"
    main(
        [
            str(cube_path),
            "--elevation",
            "0.5",
            "--up-axis",
            "z",
            "--params",
            str(params_path),
            "--metadata",
            str(metadata_path),
        ]
    )
    metadata = json.loads(metadata_path.read_text())
    assert metadata["up_axis"] == "z"
    assert metadata["slice_count"] == 5
    assert metadata["volume"] == pytest.approx(6.0)


def test_load_parameters_defaults():
    assert load_parameters(None) == EstimationParameters()


@pytest.mark.parametrize(
    "kwargs",
    [{"slice_count": 0}, {"slice_count": 2.5}, {"up_axis": "w"}, {"precision": -1}],
)
def test_invalid_parameters_are_rejected(kwargs):
    with pytest.raises(ValueError):
        EstimationParameters(**kwargs)


def test_cli_accepts_whole_number_floats_in_parameter_file(cube_path: Path, tmp_path: Path, capsys):
    params_path = tmp_path / "params.json"
    params_path.write_text(json.dumps({"slice_count": 5.0, "up_axis": "z"}))
    status = main([str(cube_path), "--elevation", "0.0", "--params", str(params_path)])
    assert status == 0
    assert float(capsys.readouterr().out) == pytest.approx(4.0)


def test_whole_number_float_slice_count_is_stored_as_int():
    params = EstimationParameters(slice_count=4.0, precision=3.0)
    assert params.slice_count == 4
    assert isinstance(params.slice_count, int)
    assert isinstance(params.precision, int)


def test_load_parameters_keeps_defaults_for_missing_keys(tmp_path: Path):
    params_path = tmp_path / "params.json"
    params_path.write_text(json.dumps({"up_axis": "z"}))
    assert load_parameters(params_path) == EstimationParameters(up_axis="z")


@pytest.mark.parametrize("content", [[1, 2, 3], {"slices": 10}])
def test_load_parameters_rejects_malformed_files(tmp_path: Path, content):
    params_path = tmp_path / "params.json"
    params_path.write_text(json.dumps(content))
    with pytest.raises(ValueError):
        load_parameters(params_path)
