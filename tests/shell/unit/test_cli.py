import json

import pytest

import ordershell.shell.cli as cli
import ordershell.shell.config as config


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    for name in ("ORDERSHELL_START_URL", "ORDERSHELL_HANDOFF_MODE", "ORDERSHELL_DISABLE_ZOOM"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", tmp_path / "missing.json")


def _write_cfg(tmp_path, **values):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(values), encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "argv",
    [
        ["ordershell"],
        ["ordershell", "check"],
        ["ordershell", "frobnicate"],
        ["ordershell", "script", "extra"],
        ["ordershell", "--unknown", "config"],
        ["ordershell", "check", "--config"],
    ],
)
def test_usage_errors_return_2(argv, capsys):
    assert cli.main(argv) == 2
    assert "usage:" in capsys.readouterr().err


def test_check_prints_one_line_per_url(tmp_path, capsys):
    path = _write_cfg(tmp_path, startUrl="https://shop.example.ch/", allowList=["shop.example.ch"])

    rc = cli.main(
        [
            "ordershell",
            "--config",
            str(path),
            "check",
            "https://shop.example.ch/cart",
            "https://play.google.com/store/apps/details?id=x",
            "garbage",
        ]
    )

    assert rc == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "allow\tconfigured\tshop.example.ch\thttps://shop.example.ch/cart"
    assert lines[1].startswith("external_handoff\texternal_app\tplay.google.com\t")
    assert lines[2] == "allow\tdefault\t-\tgarbage"


def test_check_json_output_respects_mode(tmp_path, capsys):
    path = _write_cfg(tmp_path, startUrl="https://shop.example.ch/", externalHandoffMode="conservative")

    rc = cli.main(["ordershell", f"--config={path}", "--json", "check", "https://maps.example.org/"])

    assert rc == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows == [
        {"url": "https://maps.example.org/", "host": "maps.example.org", "verdict": "external_handoff", "origin": "default"}
    ]


def test_script_command_honors_allow_zoom(capsys):
    assert cli.main(["ordershell", "script"]) == 0
    assert "user-scalable=no" in capsys.readouterr().out

    assert cli.main(["ordershell", "script", "--allow-zoom"]) == 0
    assert "user-scalable=no" not in capsys.readouterr().out


def test_config_command_prints_resolved_config(capsys):
    assert cli.main(["ordershell", "config"]) == 0
    cfg = json.loads(capsys.readouterr().out)
    assert cfg["appName"] == "Pizza Made in Italy"
    assert "pizzamadeinitaly.kuriersoft.ch" in cfg["allowList"]


def test_config_errors_return_3(tmp_path, capsys):
    bad = _write_cfg(tmp_path, externalHandoffMode="strict")
    assert cli.main(["ordershell", "--config", str(bad), "config"]) == 3
    assert "Config error" in capsys.readouterr().err

    assert cli.main(["ordershell", "--config", str(tmp_path / "missing-too.json"), "config"]) == 3


def test_verbose_logs_to_stderr(capsys):
    assert cli.main(["ordershell", "-v", "check", "https://twitter.com/x"]) == 0
    err = capsys.readouterr().err
    assert "[ordershell]" in err
    assert "https://twitter.com/x -> external_handoff (external_app)" in err
