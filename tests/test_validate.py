import validate


def test_dependencies_are_reported_installed(capsys):
    assert validate.check_python_imports() is True
    assert "NOT installed" not in capsys.readouterr().out


def test_fonts_report_has_both_weights():
    found = validate.check_fonts()
    assert set(found) == {"bold", "regular"}


def test_main_succeeds_when_dependencies_are_present():
    assert validate.main() == 0
