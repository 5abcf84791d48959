import pytest

from hotelkeeper.dates import SECONDS_PER_DAY
from hotelkeeper.guest import Guest
from hotelkeeper.room import NoOpenVisitError, Room, RoomOccupiedError


def make_guest(guest_id, points=0):
    return Guest(guest_id, "Ivan", "Petrov", "555-0100", "ivan@example.com", 42, "1990", points)


@pytest.fixture
def room():
    r = Room(101, "Suite")
    r.add_guest(make_guest(1))
    r.add_guest(make_guest(2))
    return r


def test_default_room():
    r = Room()
    assert (r.number, r.room_type, r.occupied) == (0, "Standard", False)


def test_add_and_get_guest(room):
    assert room.get_guest(1).id == 1
    assert room.get_guest(99) is None


def test_duplicate_guest_rejected(room):
    with pytest.raises(ValueError):
        room.add_guest(make_guest(1))


def test_none_guest_rejected(room):
    with pytest.raises(TypeError):
        room.add_guest(None)


def test_remove_guest(room):
    removed = room.remove_guest(1)
    assert removed.id == 1
    assert room.get_guest(1) is None
    with pytest.raises(KeyError):
        room.remove_guest(1)


def test_check_in_unknown_guest(room):
    with pytest.raises(KeyError):
        room.check_in(99, 0)


def test_check_in_marks_room_occupied(room):
    room.check_in(1, 1000)
    assert room.occupied
    with pytest.raises(RoomOccupiedError):
        room.check_in(2, 2000)


def test_check_out_awards_ten_points_per_day(room):
    room.check_in(1, 0)
    visit = room.check_out(1, 3 * SECONDS_PER_DAY + 500)
    assert room.loyalty_points(1) == 30
    assert visit.check_out_date == 3 * SECONDS_PER_DAY + 500
    assert not room.occupied


def test_short_stay_earns_nothing(room):
    room.check_in(1, 0)
    room.check_out(1, SECONDS_PER_DAY - 1)
    assert room.loyalty_points(1) == 0


def test_check_out_needs_open_visit(room):
    with pytest.raises(NoOpenVisitError):
        room.check_out(1, 10)
    room.check_in(1, 0)
    with pytest.raises(NoOpenVisitError):
        room.check_out(2, 10)


def test_visit_history_filters_by_guest(room):
    room.check_in(1, 0)
    room.check_out(1, 10)
    room.check_in(2, 20)
    room.check_out(2, 30)
    room.check_in(1, 40)
    history = room.visit_history(1)
    assert [v.check_in_date for v in history] == [0, 40]
    assert history[1].is_open and not history[0].is_open
    assert all(v.room_number == 101 for v in history)


def test_visit_history_returns_copies(room):
    room.check_in(1, 0)
    room.visit_history(1)[0].interactions.append("tampered")
    assert room.interactions(1) == []


def test_interactions_span_visits(room):
    room.check_in(1, 0)
    room.add_interaction(1, "room service")
    room.check_out(1, 10)
    room.check_in(1, 20)
    room.add_interaction(1, "late checkout")
    assert room.interactions(1) == ["room service", "late checkout"]
    assert room.interactions(2) == []


def test_interaction_needs_open_visit(room):
    with pytest.raises(NoOpenVisitError):
        room.add_interaction(1, "towels")


def test_add_loyalty_points(room):
    room.add_loyalty_points(2, 7)
    assert room.loyalty_points(2) == 7
    assert room.loyalty_points(99) == 0
    with pytest.raises(KeyError):
        room.add_loyalty_points(99, 1)