import json
import sys
from pathlib import Path

import pytest

pytest.importorskip("pandas")
openpyxl = pytest.importorskip("openpyxl")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from crmkit.cli import main
from crmkit.tools.tickets import Employee, Ticket
from crmkit.util.report.excel import read_tickets, write_employees, write_tickets


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "missing.yaml")]


def _ticket(serial, **overrides):
    base = dict(date_of_service="2024-05-01", serial_token=serial, allotted_to="Asha")
    base.update(overrides)
    return Ticket(**base)


def test_base_path_command(monkeypatch, capsys, no_config):
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    monkeypatch.setenv("GITHUB_REPOSITORY", "acme/crm-ui")
    assert main([*no_config, "base-path"]) == 0
    assert capsys.readouterr().out.strip() == "/crm-ui/"


def test_build_config_command_uses_dev_server_section(monkeypatch, capsys, tmp_path):
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    config = tmp_path / "crmkit.yaml"
    config.write_text("dev_server:\n  port: 4000\n  open: true\n", encoding="utf-8")
    assert main(["--config", str(config), "build-config"]) == 0
    assert json.loads(capsys.readouterr().out) == {"base": "/", "server": {"port": 4000, "open": True}}


def test_summary_command_writes_output(capsys, tmp_path, no_config):
    output = tmp_path / "reports" / "Project-Summary.xlsx"
    assert main([*no_config, "summary", "--output", str(output)]) == 0
    assert f"Wrote {output.resolve()}" in capsys.readouterr().out
    wb = openpyxl.load_workbook(output)
    assert wb.sheetnames == ["Frontend", "Backend", "Next Steps"]
    wb.close()


def test_summary_command_resolves_from_anchor(tmp_path, no_config):
    anchor = tmp_path / "workspace" / "crm" / "scripts"
    assert main([*no_config, "summary", "--anchor", str(anchor)]) == 0
    assert (tmp_path / "workspace" / "Project-Summary.xlsx").is_file()


def test_summary_command_reports_write_failure(tmp_path, no_config):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    assert main([*no_config, "summary", "--output", str(blocker / "out.xlsx")]) == 1


def test_import_tickets_merges_into_target(capsys, tmp_path, no_config):
    target = write_tickets([_ticket("RFP-1")], tmp_path / "tenders.xlsx")
    source = write_tickets([_ticket("rfp-1", allotted_to="Ravi"), _ticket("RFP-2")], tmp_path / "upload.xlsx")
    assert main([*no_config, "import-tickets", str(source), "--into", str(target)]) == 0
    assert capsys.readouterr().out.strip() == "Imported 1 ticket(s). Skipped 1 duplicate(s)."
    assert [t.serial_token for t in read_tickets(target)] == ["RFP-2", "RFP-1"]


def test_import_tickets_update_mode(tmp_path, no_config):
    target = write_tickets([_ticket("RFP-1")], tmp_path / "tenders.xlsx")
    source = write_tickets([_ticket("RFP-1", allotted_to="Ravi")], tmp_path / "upload.xlsx")
    assert main([*no_config, "import-tickets", str(source), "--into", str(target), "--duplicates", "update"]) == 0
    assert read_tickets(target)[0].allotted_to == "Ravi"


def test_import_tickets_rejects_invalid_rows(capsys, tmp_path, no_config):
    source = write_tickets([_ticket("RFP-1", date_of_service="")], tmp_path / "upload.xlsx")
    target = tmp_path / "tenders.xlsx"
    assert main([*no_config, "import-tickets", str(source), "--into", str(target)]) == 2
    assert "row 2: date_of_service: Date is required." in capsys.readouterr().out
    assert not target.exists()


def test_export_template_and_import_employees(capsys, tmp_path, no_config):
    template = tmp_path / "template.xlsx"
    assert main([*no_config, "export-template", str(template)]) == 0
    assert template.is_file()
    capsys.readouterr()
    # A header-only workbook holds no employees.
    assert main([*no_config, "import-employees", str(template)]) == 2


@pytest.fixture
def blocked_dir(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    return blocker


def test_export_template_reports_write_failure(blocked_dir, no_config):
    assert main([*no_config, "export-template", str(blocked_dir / "template.xlsx")]) == 1


def test_import_tickets_reports_write_failure(tmp_path, blocked_dir, no_config):
    source = write_tickets([_ticket("RFP-1")], tmp_path / "upload.xlsx")
    target = blocked_dir / "tenders.xlsx"
    assert main([*no_config, "import-tickets", str(source), "--into", str(target)]) == 1


def test_import_employees_reports_write_failure(tmp_path, blocked_dir, no_config):
    source = write_employees([Employee("E1", "Asha")], tmp_path / "employees.xlsx")
    target = blocked_dir / "employees.xlsx"
    assert main([*no_config, "import-employees", str(source), "--into", str(target)]) == 1
