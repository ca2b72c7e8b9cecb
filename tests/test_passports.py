# tests/test_passports.py
from datetime import date

import pytest

from spendwise.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from spendwise.services.passports import PassportForm, PassportRegistry

ADMIN = "upliftcodecamp"


def _form(**overrides):
    data = {
        "first_name": "juan",
        "last_name": "dela cruz",
        "age": 30,
        "nationality": "filipino",
        "gender": "m",
        "birth_year": 1995,
        "birth_month": 6,
        "birth_day": 12,
        "city": "manila",
        "country": "philippines",
        "number": "123456",
    }
    data.update(overrides)
    return data


@pytest.fixture()
def registry():
    return PassportRegistry(ADMIN, max_birth_year=2025)


def test_add_normalises_fields(registry):
    p = registry.add(_form())
    assert p.name == "JUAN DELA CRUZ"
    assert p.nationality == "FILIPINO"
    assert p.gender == "M"
    assert p.date_of_birth == date(1995, 6, 12)
    assert p.place_of_birth == "MANILA, PHILIPPINES"
    assert registry.find(" 123456 ") == p
    assert len(registry) == 1


def test_accepts_form_objects(registry):
    p = registry.add(PassportForm(**_form(number="654321")))
    assert p.number == "654321"


@pytest.mark.parametrize(
    "field,value",
    [
        ("first_name", "   "),
        ("last_name", "42"),
        ("nationality", ""),
        ("city", "3.14"),
        ("first_name", "1e5"),
        ("nationality", "Infinity"),
        ("country", "0x10"),
        ("last_name", "0b101"),
        ("age", 0),
        ("age", "abc"),
        ("gender", "x"),
        ("number", "12345"),
        ("number", "12a456"),
    ],
)
def test_rejects_bad_fields(registry, field, value):
    with pytest.raises(ValidationError) as exc:
        registry.add(_form(**{field: value}))
    assert field in exc.value.message
    assert len(registry) == 0


@pytest.mark.parametrize(
    "year,month,day,ok",
    [
        (2000, 2, 29, True),  # divisible by 400
        (2024, 2, 29, True),
        (1900, 2, 29, False),  # century, not divisible by 400
        (2023, 2, 29, False),
        (2023, 2, 28, True),
        (2023, 4, 31, False),
        (2023, 12, 31, True),
        (2023, 13, 1, False),
        (1899, 1, 1, False),
        (2026, 1, 1, False),  # after max_birth_year
        (2023, 1, 0, False),
    ],
)
def test_date_of_birth_rules(registry, year, month, day, ok):
    form = _form(birth_year=year, birth_month=month, birth_day=day)
    if ok:
        assert registry.add(form).date_of_birth == date(year, month, day)
    else:
        with pytest.raises(ValidationError) as exc:
            registry.add(form)
        assert exc.value.message.startswith("date_of_birth")


def test_names_that_merely_contain_digits_are_text(registry):
    p = registry.add(_form(first_name="nan", last_name="o'neil 2nd", city="x1"))
    assert p.name == "NAN O'NEIL 2ND"
    assert p.place_of_birth == "X1, PHILIPPINES"


def test_duplicate_number_conflicts(registry):
    registry.add(_form())
    with pytest.raises(ConflictError):
        registry.add(_form(first_name="maria"))
    assert len(registry) == 1


def test_update_replaces_fields(registry):
    registry.add(_form())
    registry.add(_form(number="222222", first_name="ana"))

    same_number = registry.update("123456", _form(age=31))
    assert same_number.age == 31

    with pytest.raises(ConflictError):
        registry.update("123456", _form(number="222222"))

    moved = registry.update("123456", _form(number="333333"))
    assert moved.number == "333333"
    with pytest.raises(NotFoundError):
        registry.find("123456")
    assert registry.find("333333").age == 30


def test_delete(registry):
    registry.add(_form())
    registry.delete("123456")
    assert len(registry) == 0
    with pytest.raises(NotFoundError):
        registry.delete("123456")


def test_list_all_needs_admin_password(registry):
    registry.add(_form())
    with pytest.raises(UnauthorizedError):
        registry.list_all("guess")
    listed = registry.list_all(ADMIN)
    assert [p.number for p in listed] == ["123456"]
    listed.clear()  # a copy, not the registry's own list
    assert len(registry) == 1


def test_registries_do_not_share_records():
    a = PassportRegistry(ADMIN, max_birth_year=2025)
    b = PassportRegistry(ADMIN, max_birth_year=2025)
    a.add(_form())
    assert len(b) == 0
