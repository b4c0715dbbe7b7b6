import pytest

from gradebook.config import AppConfig
from gradebook.core.exceptions import AuthenticationError, ValidationError
from gradebook.main import GradebookApp, main


def test_main_runs_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "=== Analysis MAT / 4AHIF ===" in out
    assert "=== Certificate Max Mustermann ===" in out
    assert "Demo completed" in out


def test_main_rejects_unreadable_config(tmp_path):
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "missing.json")])


def test_app_raises_for_invalid_fields():
    app = GradebookApp(AppConfig(current_year=2024, random_seed=1))
    with pytest.raises(AuthenticationError):
        app.create_course("MAT", "Mathematics")
    referent = app.register("Ann", "Lee", "pass", "a@b.com", "1")
    assert 10000 <= int(referent.id) <= 99999
    with pytest.raises(ValidationError) as info:
        app.create_course("M", "Mathematics")
    assert info.value.field == "abbreviation"


def test_sample_data(capsys):
    app = GradebookApp(AppConfig(current_year=2024))
    referent = app.create_sample_data()
    assert len(referent.evaluations) == 5
    assert app.context.configuration_completed()
    assert app.creation.get_statistics() == {'saved': 12, 'rejected_duplicates': 0}
