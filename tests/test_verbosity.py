import pytest

from optimise.core.verbosity import Verbosity, VerbosityParseError


def test_ordering():
    assert Verbosity.SILENT < Verbosity.MONOSYLLABIC < Verbosity.CHATTY
    assert Verbosity.CHATTY > Verbosity.SILENT
    assert sorted([Verbosity.CHATTY, Verbosity.SILENT, Verbosity.MONOSYLLABIC]) == [
        Verbosity.SILENT,
        Verbosity.MONOSYLLABIC,
        Verbosity.CHATTY,
    ]


def test_upgrade_saturates():
    assert Verbosity.SILENT.upgrade() == Verbosity.MONOSYLLABIC
    assert Verbosity.MONOSYLLABIC.upgrade() == Verbosity.CHATTY
    assert Verbosity.CHATTY.upgrade() == Verbosity.CHATTY


def test_downgrade_saturates():
    assert Verbosity.CHATTY.downgrade() == Verbosity.MONOSYLLABIC
    assert Verbosity.MONOSYLLABIC.downgrade() == Verbosity.SILENT
    assert Verbosity.SILENT.downgrade() == Verbosity.SILENT


def test_transitions_return_members():
    level = Verbosity.SILENT
    level = level.upgrade().upgrade().upgrade()
    assert level is Verbosity.CHATTY
    assert isinstance(level.downgrade(), Verbosity)


@pytest.mark.parametrize("level", list(Verbosity), ids=lambda x: x.label)
def test_setters(level):
    assert level.silent() is Verbosity.SILENT
    assert level.monosyllabic() is Verbosity.MONOSYLLABIC
    assert level.chatty() is Verbosity.CHATTY


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", Verbosity.SILENT),
        ("1", Verbosity.MONOSYLLABIC),
        ("2", Verbosity.CHATTY),
        ("silent", Verbosity.SILENT),
        ("Monosyllabic", Verbosity.MONOSYLLABIC),
        ("CHATTY", Verbosity.CHATTY),
        (" chatty ", Verbosity.CHATTY),
    ],
)
def test_parse(text, expected):
    assert Verbosity.parse(text) is expected


@pytest.mark.parametrize("text", ["", "3", "-1", "loud", "silently", "1.0"])
def test_parse_invalid(text):
    with pytest.raises(VerbosityParseError) as excinfo:
        Verbosity.parse(text)
    assert excinfo.value.text == text
    assert isinstance(excinfo.value, ValueError)


def test_str():
    assert str(Verbosity.SILENT) == "verbosity level 0 ('silent')"
    assert str(Verbosity.MONOSYLLABIC) == "verbosity level 1 ('monosyllabic')"
    assert str(Verbosity.CHATTY) == "verbosity level 2 ('chatty')"
