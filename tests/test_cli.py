"""
Command line tests: python -m dakzg
"""
import json

from dakzg.__main__ import main
from dakzg.srs import SRS


class TestGenerateSRS:
    def test_writes_payload(self, tmp_path, capsys):
        out = tmp_path / "srs.bin"
        code = main(["generate-srs", "--order", "4", "--seed", "cli", "--out", str(out)])
        assert code == 0
        assert out.read_bytes() == SRS.generate(4, "cli").to_bytes()
        assert "srs_order=4" in capsys.readouterr().out

    def test_g2_powers(self, tmp_path):
        out = tmp_path / "srs.bin"
        main(["generate-srs", "--order", "2", "--seed", "cli",
              "--out", str(out), "--g2-powers", "3"])
        assert len(SRS.from_bytes(out.read_bytes()).g2) == 3


class TestInspectSRS:
    def test_summary(self, tmp_path, capsys):
        out = tmp_path / "srs.bin"
        main(["generate-srs", "--order", "4", "--seed", "inspect", "--out", str(out)])
        capsys.readouterr()

        assert main(["inspect-srs", str(out)]) == 0
        summary = json.loads(capsys.readouterr().out)
        assert summary["srs_order"] == 4
        assert summary["g1_count"] == 4
        assert summary["g2_count"] == 2
        assert summary["tau_g2_index"] == 1
        assert summary["g1_head"][0] == ["1", "2"]
        assert len(summary["g1_head"]) == 2

    def test_missing_file(self, tmp_path, capsys):
        assert main(["inspect-srs", str(tmp_path / "missing.bin")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_corrupt_file(self, tmp_path, capsys):
        bad = tmp_path / "bad.bin"
        bad.write_bytes(b"\x00" * 100)
        assert main(["inspect-srs", str(bad)]) == 1
        assert "error" in capsys.readouterr().err


class TestCommit:
    def test_hello(self, tmp_path, capsys, hello_commitment):
        data = tmp_path / "hello.txt"
        data.write_bytes(b"hello")
        assert main(["commit", str(data)]) == 0
        printed = json.loads(capsys.readouterr().out)
        assert (printed["x"], printed["y"]) == hello_commitment
