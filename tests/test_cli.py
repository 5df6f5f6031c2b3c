"""End-to-end tests for the command-line entry point."""

from pathlib import Path

import pytest

from tickets_analyzer.cli import main
from tests.conftest import make_record


@pytest.fixture
def tickets_file(write_tickets) -> Path:
    return write_tickets(
        [
            make_record(carrier="TK", arrival=("12.05.18", "22:10")),         # 350 min
            make_record(carrier="TK", arrival=("12.05.18", "18:50")),         # 150 min
            make_record(carrier="S7", arrival=("12.05.18", "19:40")),         # 200 min
            make_record(carrier="SU", departure=("12.05.18", "16:20 ")),      # malformed
            make_record(carrier="BA", origin="LED", destination="UFA"),
        ]
    )


class TestMain:
    def test_default_route(self, tickets_file: Path, capsys) -> None:
        assert main([str(tickets_file)]) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "Минимальное время полета по перевозчикам:",
            "S7: 3ч 20м",
            "TK: 2ч 30м",
            "",
            "Среднее время полета: 233 минут",
            "Медианное время полета: 200 минут",
            "Разница (среднее - медиана): 33 минут",
        ]
        assert "Skipping invalid ticket #4" in captured.err

    def test_explicit_route(self, tickets_file: Path, capsys) -> None:
        assert main([str(tickets_file), "LED", "UFA"]) == 0
        out = capsys.readouterr().out
        assert "BA: 5ч 50м" in out
        assert "TK" not in out

    def test_route_not_found(self, tickets_file: Path, capsys) -> None:
        assert main([str(tickets_file), "TLV", "VVO"]) == 0
        out = capsys.readouterr().out
        assert out.count("Билеты по маршруту TLV → VVO не найдены.") == 1
        assert "Среднее" not in out

    def test_default_route_from_env(self, tickets_file: Path, capsys, monkeypatch) -> None:
        monkeypatch.setenv("TICKETS_ANALYZER_ORIGIN", "LED")
        monkeypatch.setenv("TICKETS_ANALYZER_DESTINATION", "UFA")
        assert main([str(tickets_file)]) == 0
        assert "BA: 5ч 50м" in capsys.readouterr().out

    def test_home_path(self, tickets_file: Path, capsys, monkeypatch) -> None:
        monkeypatch.setenv("HOME", str(tickets_file.parent))
        assert main(["~/" + tickets_file.name]) == 0
        assert "S7: 3ч 20м" in capsys.readouterr().out

    def test_single_route_code_is_usage_error(self, tickets_file: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main([str(tickets_file), "VVO"])
        assert exc.value.code == 2

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "absent.json")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Cannot read file")

    def test_structural_error(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "t.json"
        path.write_text('{"tickets": "none"}', encoding="utf-8")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "'tickets' must be an array" in captured.err

    def test_unreadable_config(self, tickets_file: Path, tmp_path: Path, capsys) -> None:
        (tmp_path / "tickets_analyzer.toml").mkdir()
        assert main([str(tickets_file)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Cannot read config file")
