import json

import pytest

from qstools.extract import extract_messages, main


def _write(directory, name, text):
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_extract_first_argument(tmp_path):
    _write(
        tmp_path,
        "cmd.py",
        'i18n.sprintf("Name: %s", name)\ni18n.printf("<%s> copied\\n", key)\n',
    )
    assert extract_messages(tmp_path) == {
        "Name: %s": "Name: %s",
        "<%s> copied\n": "<%s> copied\n",
    }


def test_extract_fprintf_takes_second_argument(tmp_path):
    _write(tmp_path, "cmd.py", 'i18n.fprintf(out, "Key: %s", key)\n')
    assert extract_messages(tmp_path) == {"Key: %s": "Key: %s"}


def test_extract_ignores_other_calls(tmp_path):
    _write(
        tmp_path,
        "cmd.py",
        "\n".join(
            [
                'other.sprintf("skip me")',
                'sprintf("skip too")',
                "i18n.sprintf(template)",
                'i18n.sprintf(f"{x}")',
                "i18n.sprint()",
                'i18n.fprintf("only one")',
                'i18n.sprint("kept")',
            ]
        ),
    )
    assert extract_messages(tmp_path) == {"kept": "kept"}


def test_extract_reads_only_top_level_python_files(tmp_path):
    _write(tmp_path, "a.py", 'i18n.sprintf("from a")\n')
    _write(tmp_path, "notes.txt", 'i18n.sprintf("from text")\n')
    nested = tmp_path / "sub"
    nested.mkdir()
    _write(nested, "b.py", 'i18n.sprintf("from nested")\n')
    assert set(extract_messages(tmp_path)) == {"from a"}


def test_extract_duplicates_collapse(tmp_path):
    _write(tmp_path, "a.py", 'i18n.sprintf("same")\n')
    _write(tmp_path, "b.py", 'i18n.printf("same")\n')
    result = extract_messages(tmp_path)
    assert result == {"same": "same"}


def test_extract_syntax_error(tmp_path):
    _write(tmp_path, "broken.py", "def (:\n")
    with pytest.raises(SyntaxError):
        extract_messages(tmp_path)


def test_main_writes_sorted_json(tmp_path):
    source = tmp_path / "src"
    source.mkdir()
    _write(source, "cmd.py", 'i18n.sprintf("zeta")\ni18n.sprintf("alpha")\n')
    output = tmp_path / "data.json"

    assert main([str(source), "-o", str(output)]) == 0

    text = output.read_text(encoding="utf-8")
    assert json.loads(text) == {"alpha": "alpha", "zeta": "zeta"}
    assert text.index("alpha") < text.index("zeta")


def test_main_keeps_non_ascii(tmp_path):
    source = tmp_path / "src"
    source.mkdir()
    _write(source, "cmd.py", 'i18n.sprintf("已复制")\n')
    output = tmp_path / "data.json"

    assert main([str(source), "--output", str(output)]) == 0
    text = output.read_text(encoding="utf-8")
    assert "已复制" in text
    assert json.loads(text) == {"已复制": "已复制"}


def test_main_reports_failure(tmp_path, capsys):
    source = tmp_path / "src"
    source.mkdir()
    _write(source, "broken.py", "def (:\n")
    output = tmp_path / "data.json"

    assert main([str(source), "-o", str(output)]) == 1
    assert not output.exists()
    assert capsys.readouterr().err != ""


def test_main_missing_directory(tmp_path):
    assert main([str(tmp_path / "absent"), "-o", str(tmp_path / "out.json")]) == 1