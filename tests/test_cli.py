import pytest

from adjgraph.cli import main


def test_show_sample(capsys):
    main(["show"])
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 7
    assert lines[0] == "0: singapore ---> [2: hong kong, 1: tokyo]"
    assert lines[6] == "6: seattle ---> [1: tokyo, 3: detroit]"


def test_flights_from_singapore(capsys):
    main(["flights", "singapore"])
    assert capsys.readouterr().out == (
        "Outgoing flights from singapore\n"
        "from: singapore to: hong kong, cost: $300.0\n"
        "from: singapore to: tokyo, cost: $500.0\n"
    )


def test_flights_skips_unweighted_edges(tmp_path, capsys):
    path = tmp_path / "net.yml"
    path.write_text(
        "vertices: [a, b, c]\n"
        "currency: 'EUR '\n"
        "edges:\n"
        "  - {from: a, to: b}\n"
        "  - {from: a, to: c, weight: 2}\n"
    )
    main(["flights", "-c", str(path), "a"])
    assert capsys.readouterr().out == (
        "Outgoing flights from a\n" "from: a to: c, cost: EUR 2.0\n"
    )


def test_weight(capsys):
    main(["weight", "seattle", "detroit"])
    assert capsys.readouterr().out == "seattle -> detroit: $100.0\n"
    main(["weight", "seattle", "singapore"])
    assert capsys.readouterr().out == "none\n"


def test_unknown_city_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["flights", "atlantis"])
    assert info.value.code == 1
    assert "unknown vertex 'atlantis'" in capsys.readouterr().err


def test_unknown_city_keep_going(capsys):
    main(["flights", "-k", "atlantis"])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR: <sample>: unknown vertex 'atlantis'" in captured.err


def test_missing_config_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["show", "-k", "-c", str(tmp_path / "missing.yml")])
    assert "FATAL:" in capsys.readouterr().err


def test_verbose_logs_loading(capsys):
    main(["show", "-v"])
    assert "INFO: loaded 7 vertices from <sample>" in capsys.readouterr().err


def test_help(capsys):
    main(["help"])
    assert "usage: adjgraph" in capsys.readouterr().out
    main(["help", "flights"])
    assert "usage: adjgraph flights" in capsys.readouterr().out
