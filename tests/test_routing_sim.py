from pathlib import Path

import pytest

from routing_sim import main


CHAIN = """4
0 1 9999 9999
1 0 2 9999
9999 2 0 1
9999 9999 1 0
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "topo.txt"
    path.write_text(text)
    return path


def test_main_prints_both_simulations(tmp_path: Path, capsys):
    """Smoke-test: both algorithms report every node and exit cleanly."""
    topo = _write(tmp_path, CHAIN)

    assert main([str(topo), "--quiet"]) == 0

    out = capsys.readouterr().out
    assert "--- Distance Vector Routing Simulation ---" in out
    assert "--- DVR Final Tables ---" in out
    assert "--- Link State Routing Simulation ---" in out
    assert out.count("Node 0 Routing Table:") == 2
    assert "3\t4\t1\n" in out
    assert out.index("Distance Vector") < out.index("Link State")


def test_wrong_argument_count_exits_1(capsys):
    """Zero or two positional arguments is a usage error with exit code 1."""
    for argv in ([], ["a.txt", "b.txt"]):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 1
    assert "usage" in capsys.readouterr().err


def test_missing_file_exits_1(tmp_path: Path, capsys):
    missing = tmp_path / "nope.txt"

    assert main([str(missing)]) == 1
    assert f"Could not open file {missing}" in capsys.readouterr().err


def test_malformed_file_exits_1(tmp_path: Path, capsys):
    topo = _write(tmp_path, "3\n0 1\n")

    assert main([str(topo)]) == 1
    assert "Expected 9 costs" in capsys.readouterr().err


def test_single_algorithm_and_csv(tmp_path: Path, capsys):
    topo = _write(tmp_path, CHAIN)
    out_csv = tmp_path / "routes.csv"

    assert main([str(topo), "--algorithm", "lsr", "--csv", str(out_csv)]) == 0

    captured = capsys.readouterr()
    assert "Distance Vector" not in captured.out
    assert "[csv] wrote routes" in captured.err
    assert out_csv.read_text().splitlines()[0] == "algorithm,node,dest,cost,next_hop"


def test_check_passes_when_algorithms_agree(tmp_path: Path, capsys):
    topo = _write(tmp_path, CHAIN)

    assert main([str(topo), "--check"]) == 0
    assert "[check] DVR and LSR costs agree" in capsys.readouterr().err


def test_invalid_config_exits_1(tmp_path: Path, capsys):
    topo = _write(tmp_path, "2\n0 -1\n-1 0\n")
    cfg = tmp_path / "run.yml"
    cfg.write_text("sentinel: -1\n")

    assert main([str(topo), "--config", str(cfg), "--quiet"]) == 1
    assert "sentinel must be a positive integer" in capsys.readouterr().err


def test_config_file_selects_algorithms(tmp_path: Path, capsys):
    topo = _write(tmp_path, "2\n0 500\n500 0\n")
    cfg = tmp_path / "run.yml"
    cfg.write_text("sentinel: 500\nalgorithms: [dvr]\n")

    assert main([str(topo), "--config", str(cfg), "--quiet"]) == 0

    out = capsys.readouterr().out
    assert "Link State" not in out
    assert "1\t500\tnone" in out


def test_undecodable_file_exits_1(tmp_path: Path, capsys):
    topo = tmp_path / "binary.txt"
    topo.write_bytes(b"2\n0 1\n1 \xff\xfe\n")

    assert main([str(topo)]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_malformed_config_exits_1(tmp_path: Path, capsys):
    topo = _write(tmp_path, CHAIN)
    cfg = tmp_path / "run.yml"
    for text in ("sentinel: [1,\n", "algorithms: null\n"):
        cfg.write_text(text)

        assert main([str(topo), "--config", str(cfg)]) == 1
        assert capsys.readouterr().err.startswith("Error:")


def test_quiet_silences_trailing_token_warning(tmp_path: Path, capsys):
    topo = _write(tmp_path, CHAIN + "7 8\n")

    assert main([str(topo), "--quiet"]) == 0
    assert capsys.readouterr().err == ""


def test_trailing_token_warning_logged_when_not_quiet(tmp_path: Path, capsys):
    topo = _write(tmp_path, CHAIN + "7 8\n")

    assert main([str(topo)]) == 0
    assert "[load] ignoring 2 trailing token(s)" in capsys.readouterr().err


def test_lsr_reports_unreachable_destination(tmp_path: Path, capsys):
    """A disconnected node shows the sentinel cost and no next hop in LSR tables."""
    topo = _write(tmp_path, "3\n0 1 9999\n1 0 9999\n9999 9999 0\n")

    assert main([str(topo), "--algorithm", "lsr", "--quiet"]) == 0

    out = capsys.readouterr().out
    node0 = out[out.index("Node 0 Routing Table:"):out.index("Node 1 Routing Table:")]
    assert "1\t1\t1\n" in node0
    assert "2\t9999\tnone\n" in node0
    assert "0\t" not in node0.split("Next Hop\n", 1)[1]
    node2 = out[out.index("Node 2 Routing Table:"):]
    assert "0\t9999\tnone\n" in node2
    assert "1\t9999\tnone\n" in node2
