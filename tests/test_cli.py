from pathlib import Path

import pytest

from hanzi_categorizer import cli
from hanzi_categorizer.models import Category


def test_main_writes_outputs(tmp_path: Path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("你好 hello\n你们\n", encoding="utf-8")
    output_dir = tmp_path / "out"
    output_dir.mkdir()

    cli.main([str(source), str(output_dir), "--backend", "simple"])

    out = capsys.readouterr().out
    assert "中文内容已分类并写入输出文件。" in out
    assert "ChineseCharacters.txt: 3" in out
    assert (output_dir / Category.characters.filename).read_text(encoding="utf-8") == "你\n好\n们\n"
    assert (output_dir / Category.nouns.filename).read_text(encoding="utf-8") == ""


def test_main_uses_custom_slang_list(tmp_path: Path):
    source = tmp_path / "input.txt"
    source.write_text("躺平", encoding="utf-8")
    slang = tmp_path / "slang.txt"
    slang.write_text("躺\n", encoding="utf-8")

    cli.main([str(source), str(tmp_path), "--backend", "simple", "--slang", str(slang)])

    assert (tmp_path / Category.slang.filename).read_text(encoding="utf-8") == "躺\n"


def test_main_prompts_for_missing_paths(tmp_path: Path, monkeypatch):
    source = tmp_path / "input.txt"
    source.write_text("好", encoding="utf-8")
    answers = iter([str(source), str(tmp_path)])
    monkeypatch.setattr("builtins.input", lambda message: next(answers))

    cli.main(["--backend", "simple"])

    assert (tmp_path / Category.characters.filename).read_text(encoding="utf-8") == "好\n"


def test_main_aborts_on_empty_answer(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda message: "")
    with pytest.raises(SystemExit):
        cli.main(["--backend", "simple"])


def test_main_reports_failed_stage(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path / "missing.txt"), str(tmp_path), "--backend", "simple"])
    assert "无法读取输入文件" in str(excinfo.value.code)


def test_main_reports_undecodable_phrase_list(tmp_path: Path):
    source = tmp_path / "input.txt"
    source.write_text("学霸", encoding="utf-8")
    slang = tmp_path / "slang.txt"
    slang.write_bytes("学霸\n".encode("gbk"))

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(source), str(tmp_path), "--backend", "simple", "--slang", str(slang)])
    assert "无法读取词表" in str(excinfo.value.code)


def test_main_reads_phrase_list_with_given_encoding(tmp_path: Path):
    source = tmp_path / "input.txt"
    source.write_bytes("霸".encode("gbk"))
    slang = tmp_path / "slang.txt"
    slang.write_bytes("霸\n".encode("gbk"))

    cli.main([str(source), str(tmp_path), "--backend", "simple", "--slang", str(slang), "--encoding", "gbk"])

    assert (tmp_path / Category.slang.filename).read_bytes() == "霸\n".encode("gbk")
