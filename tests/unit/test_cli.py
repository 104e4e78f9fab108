import json
import os
from unittest.mock import patch

from click.testing import CliRunner

from diskinformer.cli.commands import diskinformer_cli


def _write(tmp_path, document):
    path = tmp_path / "disk.json"
    path.write_text(document)
    return path.as_posix()


def test_default_prints_default_config():
    result = CliRunner().invoke(diskinformer_cli, ["disk", "default"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"metric_ttl": "30s", "metric_type": "freespace"}


def test_validate_prints_normalized_config(tmp_path):
    path = _write(tmp_path, '{"metric_ttl": "90s", "metric_type": "reposize"}')
    result = CliRunner().invoke(diskinformer_cli, ["disk", "validate", "--config-file", path])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"metric_ttl": "1m30s", "metric_type": "reposize"}


def test_validate_applies_environment(tmp_path):
    path = _write(tmp_path, '{"metric_ttl": "90s", "metric_type": "reposize"}')
    with patch.dict(os.environ, {"DISKINFORMER_DISK_METRIC_TYPE": "freespace"}):
        result = CliRunner().invoke(diskinformer_cli, ["disk", "validate", "--config-file", path, "--apply-env"])
    assert result.exit_code == 0
    assert json.loads(result.output)["metric_type"] == "freespace"


def test_validate_reports_invalid_config(tmp_path):
    path = _write(tmp_path, '{"metric_ttl": "90s", "metric_type": "bogus"}')
    result = CliRunner().invoke(diskinformer_cli, ["disk", "validate", "--config-file", path])
    assert result.exit_code == 1
    assert "disk.metric_type is invalid" in result.output


def test_rpc_prints_method(tmp_path):
    path = _write(tmp_path, '{"metric_ttl": "30s", "metric_type": "reposize"}')
    result = CliRunner().invoke(diskinformer_cli, ["disk", "rpc", "--config-file", path])
    assert result.exit_code == 0
    assert result.output.strip() == "IPFSRepoSize"
