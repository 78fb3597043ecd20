"""
Integration tests for scripts/build_document.py.
"""

import importlib.util
import json
from pathlib import Path

import pytest
from loguru import logger
from omegaconf import OmegaConf
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).parents[2] / "scripts" / "build_document.py"

runner = CliRunner()


@pytest.fixture
def cli(tmp_path, monkeypatch):
    spec = importlib.util.spec_from_file_location("build_document", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.setattr(module, "OUTPUT_PATH", tmp_path / "documents")
    monkeypatch.setattr("docbuilder.utils.logger.CONSOLE_LEVEL", "INFO")
    yield module
    # Drop sinks bound to the runner's captured stderr
    logger.remove()


def _write_fields(path: Path, fields: dict) -> Path:
    # JSON is valid YAML
    path.write_text(json.dumps(fields))
    return path


@pytest.mark.integration
def test_demo_then_validate(cli, tmp_path):
    fields_file = tmp_path / "letter.yaml"

    result = runner.invoke(cli.app, ["demo", "letter", "-o", str(fields_file)])
    assert result.exit_code == 0
    assert OmegaConf.load(fields_file)["recipientName"] == "Mary Johnson"

    result = runner.invoke(cli.app, ["validate", "letter", str(fields_file)])
    assert result.exit_code == 0
    assert "All required fields present" in result.output


@pytest.mark.integration
def test_validate_reports_missing_fields(cli, tmp_path):
    fields_file = _write_fields(tmp_path / "cv.yaml", {"firstName": "Ann"})

    result = runner.invoke(cli.app, ["validate", "cv", str(fields_file)])

    assert result.exit_code == 1
    assert "lastName" in result.output
    assert "phone" in result.output


@pytest.mark.integration
def test_unknown_type_exits_with_error(cli, tmp_path):
    fields_file = _write_fields(tmp_path / "memo.yaml", {"a": "b"})

    result = runner.invoke(cli.app, ["validate", "memo", str(fields_file)])

    assert result.exit_code == 1


@pytest.mark.integration
def test_preview_accepts_json_fields(cli, tmp_path):
    fields_file = tmp_path / "protocol.json"
    fields_file.write_text(json.dumps({"meetingType": "Board", "agenda": "One\nTwo"}))
    output = tmp_path / "preview.html"

    result = runner.invoke(cli.app, ["preview", "protocol", str(fields_file), "-o", str(output)])

    assert result.exit_code == 0
    html = output.read_text(encoding="utf-8")
    assert "1. One" in html
    assert "2. Two" in html


@pytest.mark.integration
def test_layout_writes_json(cli, tmp_path):
    fields_file = _write_fields(tmp_path / "cv.yaml", {"firstName": "Ann", "lastName": "Lee", "phone": "555"})
    output = tmp_path / "layout.json"

    result = runner.invoke(cli.app, ["layout", "cv", str(fields_file), "-o", str(output)])

    assert result.exit_code == 0
    assert set(json.loads(output.read_text(encoding="utf-8"))) == {"content", "defaultStyle", "styles"}


@pytest.mark.integration
def test_export_writes_pdf(cli, tmp_path):
    fields_file = _write_fields(
        tmp_path / "protocol.yaml", {"meetingType": "Board", "date": "2024-06-15", "participants": "A\nB", "protocolNumber": "7"}
    )

    result = runner.invoke(cli.app, ["export", "protocol", str(fields_file)])

    assert result.exit_code == 0
    pdf_path = tmp_path / "documents" / "Protocol_7_15.06.2024.pdf"
    assert pdf_path.read_bytes().startswith(b"%PDF")


@pytest.mark.integration
def test_export_refuses_invalid_document(cli, tmp_path):
    fields_file = _write_fields(tmp_path / "letter.yaml", {"recipientName": "Mary"})

    result = runner.invoke(cli.app, ["export", "letter", str(fields_file), "-d", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "subject" in result.output
    assert not (tmp_path / "out").exists()


@pytest.mark.integration
def test_unquoted_yaml_values_stay_as_written(cli, tmp_path):
    fields_file = tmp_path / "protocol.yaml"
    fields_file.write_text("meetingType: Board\ntime: 10:00\nsecretary: 0501234567\n")
    output = tmp_path / "preview.html"

    result = runner.invoke(cli.app, ["preview", "protocol", str(fields_file), "-o", str(output)])

    assert result.exit_code == 0
    html = output.read_text(encoding="utf-8")
    assert "10:00" in html
    assert "0501234567" in html


@pytest.mark.integration
def test_unquoted_stamp_checkbox_is_on(cli, tmp_path):
    fields_file = tmp_path / "letter.yaml"
    fields_file.write_text("recipientName: Mary\naddStamp: on\n")
    output = tmp_path / "layout.json"

    result = runner.invoke(cli.app, ["layout", "letter", str(fields_file), "-o", str(output)])

    assert result.exit_code == 0
    assert "Place for stamp" in output.read_text(encoding="utf-8")


@pytest.mark.integration
def test_preview_debug_records_go_to_log_file_only(cli, tmp_path):
    fields_file = _write_fields(tmp_path / "cv.yaml", {"firstName": "Ann", "lastName": "Lee"})

    result = runner.invoke(cli.app, ["preview", "cv", str(fields_file)])

    assert result.exit_code == 0
    assert "[template]" not in result.output
    # Close the file sink before reading it
    logger.remove()
    (log_file,) = (tmp_path / "logs").glob("preview_*/documents.log")
    assert "[template] Rendered cv preview" in log_file.read_text()
