import json
import logging

from typer.testing import CliRunner

from stintvid.cli import app
from stintvid.config import Settings

runner = CliRunner()


def test_length_each():
    result = runner.invoke(app, ["length", "1.0", "2:11.0", "1:02:11.0"])
    assert result.exit_code == 0
    assert result.stdout.split() == ["1.000", "131.000", "3731.000"]


def test_length_total():
    result = runner.invoke(app, ["length", "--total", "2:11.0", "1:02:11.0"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "3862.000"


def test_length_rejects_malformed():
    result = runner.invoke(app, ["length", "1:00", "ab:cd"])
    assert result.exit_code == 2
    assert "ab:cd" in result.output


def test_precision_override():
    result = runner.invoke(app, ["--set", "output.precision=1", "length", "2:11.25"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "131.2"


def test_unknown_override_key():
    result = runner.invoke(app, ["--set", "output.width=3", "length", "1"])
    assert result.exit_code == 2
    assert "unknown configuration key" in result.output


def test_override_without_equals():
    result = runner.invoke(app, ["--set", "output.precision", "length", "1"])
    assert result.exit_code == 2


def test_config_file(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"output": {"precision": 0}}))
    result = runner.invoke(app, ["--config", str(p), "length", "2:11.0"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "131"


def test_missing_config_file(tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.json"), "length", "1"])
    assert result.exit_code == 2
    assert "configuration file not found" in result.output


def test_settings_from_obj():
    cfg = Settings.model_validate({"output": {"precision": 2}})
    result = runner.invoke(app, ["span", "1:00", "2:30"], obj=cfg)
    assert result.exit_code == 0
    assert result.stdout.strip() == "90.00"


def test_span_reversed():
    result = runner.invoke(app, ["span", "2:30", "1:00"])
    assert result.exit_code == 2
    assert "ends before it starts" in result.output


def test_span_malformed():
    result = runner.invoke(app, ["span", "1:00", "soon"])
    assert result.exit_code == 2
    assert "soon" in result.output


def test_length_out_of_range():
    result = runner.invoke(app, ["length", "9" * 400 + ":00"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, OverflowError)


def test_length_total_out_of_range():
    huge = "9" * 308
    result = runner.invoke(app, ["length", "--total", huge, huge])
    assert result.exit_code == 2
    assert "out of range" in result.output


def test_level_override_is_coerced():
    result = runner.invoke(app, ["--set", "logging.level=debug", "length", "1"])
    assert result.exit_code == 0
    assert logging.getLogger("stintvid").level == logging.DEBUG


def test_invalid_override_value():
    result = runner.invoke(app, ["--set", "output.precision=many", "length", "1"])
    assert result.exit_code == 2
    assert "invalid configuration override" in result.output


def test_override_of_method_name_rejected():
    result = runner.invoke(app, ["--set", "output.model_dump=1", "length", "1"])
    assert result.exit_code == 2
    assert "unknown configuration key" in result.output


def test_bad_yaml_config(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("output: [1, 2\n")
    result = runner.invoke(app, ["--config", str(p), "length", "1"])
    assert result.exit_code == 2
    assert "failed to load configuration" in result.output
