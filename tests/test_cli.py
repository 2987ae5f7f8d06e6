import json
from pathlib import Path

import pandas as pd

from abnt_references import cli


def test_format_command_prints_reference(capsys):
    exit_code = cli.main(
        [
            "format",
            "--type",
            "book",
            "--field",
            "author=João Silva",
            "--field",
            "title=Livro",
            "--field",
            "year=2020",
        ]
    )

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "SILVA, João. **Livro**. Local: Editora, 2020."


def test_format_command_rejects_bad_field(capsys):
    assert cli.main(["format", "--type", "book", "--field", "title"]) == 2


def test_cite_command_json(capsys):
    exit_code = cli.main(["cite", "--author", "João Silva", "--year", "2023", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload[2]["text"] == "(SILVA, 2023)"


def test_validate_command_writes_outputs(tmp_path: Path, capsys):
    refs = tmp_path / "refs.txt"
    refs.write_text(
        "SILVA, João. **Livro**. São Paulo: Editora, 2023.\n\nsilva joão livro sem nada\n",
        encoding="utf-8",
    )
    json_out = tmp_path / "reports.json"
    csv_out = tmp_path / "reports.csv"

    exit_code = cli.main(
        ["validate", "--input", str(refs), "--json-output", str(json_out), "--csv-output", str(csv_out)]
    )

    output = capsys.readouterr().out
    assert exit_code == 1
    assert "References checked: 2" in output
    assert "Valid references: 1" in output

    reports = json.loads(json_out.read_text(encoding="utf-8"))
    assert reports[0]["isValid"] is True
    assert reports[1]["score"] == 20

    table = pd.read_csv(csv_out)
    assert list(table["Valid"]) == ["Yes", "No"]


def test_validate_command_all_valid_exits_zero(capsys):
    exit_code = cli.main(["validate", "SILVA, João. **Livro**. São Paulo: Editora, 2023."])

    assert exit_code == 0
    assert "[OK]" in capsys.readouterr().out


def test_validate_command_without_references_fails(capsys):
    assert cli.main(["validate"]) == 2
