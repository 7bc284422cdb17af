"""
Pytest tests for the analyze_input console tool.
"""

from __future__ import annotations

import json

from backend_neroguard.tools.analyze_input import EXIT_INVALID_INPUT, main


def test_prints_text_report(capsys):
    assert main(["hello, how are you today"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("NeroGuard Security Report\n")
    assert "Risk Level: LOW" in out


def test_prints_json(capsys):
    assert main(["--json", "example.xyz"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["riskLevel"] == "medium"
    assert data["inputType"] == "domain"
    assert [i["type"] for i in data["indicators"]] == ["Unusual TLD"]


def test_blank_input_exit_code(capsys):
    assert main(["   "]) == EXIT_INVALID_INPUT
    assert "Please enter a URL" in capsys.readouterr().err


def test_save_records_history(history_db, capsys):
    assert main(["--save", "http://g00gle.com"]) == 0
    entries = history_db.load_history()
    assert [e.input for e in entries] == ["http://g00gle.com"]
    assert entries[0].result.risk_level == "critical"
