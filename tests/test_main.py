from config_lite import main as cli


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_dump_prints_configuration(tmp_path, capsys):
    path = _write(tmp_path / "a.ini", '[db]\nhost = "localhost"\n')
    assert cli.main(["dump", path]) == 0
    assert capsys.readouterr().out == '\n[db]\nhost = "localhost"\n'


def test_get_value_and_default(tmp_path, capsys):
    path = _write(tmp_path / "a.ini", '[db]\nhost = "localhost"\n')
    assert cli.main(["get", path, "db", "host"]) == 0
    assert cli.main(["get", path, "db", "user", "--default", "root"]) == 0
    assert capsys.readouterr().out == "localhost\nroot\n"


def test_get_bool(tmp_path, capsys):
    path = _write(tmp_path / "a.ini", "[app]\ndebug = on\n")
    assert cli.main(["get", path, "app", "debug", "--bool"]) == 0
    assert cli.main(["get", path, "app", "missing", "--bool", "--default", "no"]) == 0
    assert capsys.readouterr().out == "yes\nno\n"


def test_get_missing_key_reports_error(tmp_path, capsys):
    path = _write(tmp_path / "a.ini", "[db]\n")
    assert cli.main(["get", path, "db", "host"]) == 1
    assert "Error: key not found" in capsys.readouterr().err


def test_missing_file_reports_error(tmp_path, capsys):
    assert cli.main(["dump", str(tmp_path / "missing.ini")]) == 1
    assert "file not found" in capsys.readouterr().err


def test_set_creates_file(tmp_path):
    path = tmp_path / "new.ini"
    assert cli.main(["set", str(path), "db", "host", "localhost"]) == 0
    assert path.read_text(encoding="utf-8").endswith('[db]\nhost = "localhost"\n')


def test_set_string_escapes(tmp_path, capsys):
    path = str(tmp_path / "new.ini")
    assert cli.main(["set", path, "s", "k", 'say "hi"', "--string"]) == 0
    assert cli.main(["get", path, "s", "k"]) == 0
    assert capsys.readouterr().out == 'say "hi"\n'


def test_remove_key_and_section(tmp_path):
    path = tmp_path / "a.ini"
    _write(path, '[db]\nhost = "localhost"\nport = 5432\n[cache]\nttl = 60\n')
    assert cli.main(["remove", str(path), "db", "port"]) == 0
    assert cli.main(["remove", str(path), "cache"]) == 0
    assert path.read_text(encoding="utf-8").endswith('[db]\nhost = "localhost"\n')


def test_remove_missing_section_fails(tmp_path):
    path = _write(tmp_path / "a.ini", "[db]\n")
    assert cli.main(["remove", path, "cache"]) == 1
