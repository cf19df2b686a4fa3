import sys

import pytest
from apps.cli import play


def test_negative_max_turns_is_a_usage_error(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(sys, "argv", [
        "play", "--dict", str(tmp_path / "dict.txt"), "--hidden", "fuzzy", "--max-turns", "-1",
    ])
    with pytest.raises(SystemExit) as exc:
        play.main()
    assert exc.value.code == 2
    assert "--max-turns" in capsys.readouterr().err
