import json

import pytest
from jsonschema import ValidationError

from fx_reporting.config import ReportingConfig, load_config
from fx_reporting.orchestrator import main


def test_main_prints_four_reports(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Amount in USD settled per day for") == 2
    assert out.count("Ranking of entities in descending order") == 2
    assert "Day: 2016-06-19, Amount: 8728.00 USD" in out
    assert "Entity: bar    , Amount: 14899.50 USD" in out
    assert out.index("incoming instructions") < out.index("outgoing instructions")


def test_main_json_output(capsys, tmp_path):
    config = tmp_path / "reporting.yaml"
    config.write_text("reporting_currency: eur\n", encoding="utf-8")
    assert main(["--format", "json", "--config", str(config)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["currency"] == "EUR"
    assert set(data["entity_ranking"]) == {"incoming", "outgoing"}


def test_main_reports_bad_instruction_file(capsys, tmp_path):
    path = tmp_path / "instructions.yaml"
    path.write_text("instructions: {}\n", encoding="utf-8")
    assert main(["--instructions", str(path)]) == 1
    assert "Unable to generate the report" in capsys.readouterr().err


def test_bundled_config():
    config = load_config()
    assert config.reporting_currency == "USD"
    assert config.calendar().is_sunday_to_thursday_market("SAR")


def test_config_defaults_and_validation(tmp_path):
    assert ReportingConfig.from_dict({}) == ReportingConfig()
    path = tmp_path / "reporting.yaml"
    path.write_text("reporting_currency: DOLLARS\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(path)


def test_main_reports_malformed_config(capsys, tmp_path):
    config = tmp_path / "reporting.yaml"
    config.write_text("reporting_currency: [USD\n", encoding="utf-8")
    assert main(["--config", str(config)]) == 1
    assert "Unable to generate the report" in capsys.readouterr().err
