import io

import pytest

from hotelkeeper.guest import Guest


@pytest.fixture
def guest():
    return Guest(7, "Anna", "Ivanova", "555-0100", "anna@example.com", 1234, "01.02.1990", 5)


def test_full_name_joins_names_as_stored(guest):
    assert guest.full_name() == "Anna" + "Ivanova"


def test_add_loyalty_points_accumulates(guest):
    before = guest.loyal_points
    guest.add_loyalty_points(10)
    guest.add_loyalty_points(3)
    assert guest.loyal_points == before + 13


def test_negative_points_are_rejected(guest):
    with pytest.raises(ValueError):
        guest.add_loyalty_points(-1)


def test_info_lists_every_field(guest):
    text = guest.info()
    assert "ID: 7" in text
    assert "Email: anna@example.com" in text
    assert "Номер паспорта: 1234" in text
    assert text.endswith("\n\n")


def test_info_reflects_changed_fields(guest):
    guest.first_name = "Maria"
    assert "Имя: Maria" in guest.info()


def test_show_info_writes_info_to_stream(guest):
    buffer = io.StringIO()
    guest.show_info(buffer)
    assert buffer.getvalue() == guest.info()


def test_show_info_defaults_to_stdout(guest, capsys):
    guest.show_info()
    assert capsys.readouterr().out == guest.info()