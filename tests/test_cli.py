import json

import pytest

import fbidump


class TestCli:

    def test_json_to_stdout(self, tmp_path, capsys, sample_text):
        source = tmp_path / "sample.fbi"
        source.write_text(sample_text, encoding="utf-8")
        assert fbidump.main([str(source), "--quiet"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "demo"
        assert data["[server]"]["[tls]"] == {"enabled": "yes"}

    def test_tree_format(self, tmp_path, capsys):
        source = tmp_path / "tree.fbi"
        source.write_text("[a]{x=1;}", encoding="utf-8")
        assert fbidump.main([str(source), "--format", "tree", "--quiet"]) == 0
        assert capsys.readouterr().out == "[]\nFields: 0\n    [a]\n    Fields: 1\n"

    def test_directory_to_output_dir(self, tmp_path):
        inputs = tmp_path / "in"
        inputs.mkdir()
        (inputs / "one.fbi").write_text("a=1;", encoding="utf-8")
        (inputs / "two.fbi").write_text("[B]{C=2;}", encoding="utf-8")
        (inputs / "ignored.txt").write_text("}", encoding="utf-8")
        out = tmp_path / "out"
        assert fbidump.main([str(inputs), "-o", str(out), "--lowercase", "--quiet"]) == 0
        assert json.loads((out / "one.json").read_text(encoding="utf-8")) == {"a": "1"}
        assert json.loads((out / "two.json").read_text(encoding="utf-8")) == {"[b]": {"c": "2"}}
        assert not (out / "ignored.json").exists()

    def test_parse_error_exit_code(self, tmp_path, capsys):
        source = tmp_path / "bad.fbi"
        source.write_text("x=1;;", encoding="utf-8")
        assert fbidump.main([str(source), "--quiet"]) == 1
        assert "Invalid character \";\" at 1:5" in capsys.readouterr().err

    def test_lenient_flag(self, tmp_path, capsys):
        source = tmp_path / "bad.fbi"
        source.write_text("x=1;;", encoding="utf-8")
        assert fbidump.main([str(source), "--lenient", "--quiet"]) == 0
        assert json.loads(capsys.readouterr().out) == {"x": "1"}

    def test_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            fbidump.main([str(tmp_path / "nope.fbi")])

    def test_empty_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="No \\*.fbi files"):
            fbidump.collect_inputs(tmp_path)
