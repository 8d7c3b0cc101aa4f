import pytest

from scripts import describe_map


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(describe_map, "setup_logging", lambda level: None)


def test_describe_turkey(capsys):
    describe_map.main(["--map", "turkey"])

    lines = capsys.readouterr().out.splitlines()
    assert "Ankara [supply center (Turkey)]: Constantinople, Smyrna" in lines
    assert lines[-1] == "3 territories, 3 borders"


def test_describe_region_after_removal(capsys):
    describe_map.main(["--map", "region", "--remove", "Black Sea", "--remove", "Syria"])

    lines = capsys.readouterr().out.splitlines()
    assert "Sevastopol [supply center (Russia)]: Armenia" in lines
    assert "Eastern Mediterranean [sea]: Smyrna" in lines
    assert lines[-1] == "6 territories, 6 borders"


def test_describe_unknown_territory():
    with pytest.raises(SystemExit):
        describe_map.main(["--remove", "Atlantis"])
