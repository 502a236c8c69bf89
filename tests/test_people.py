"""Tests for PersonSpec encoding/decoding and Person properties."""

import sys

import pytest
from pydantic import ValidationError

from core.domain.people import Person, PersonSpec, parse_person_spec
from core.errors import EmptyPersonSpecError, InvalidPersonSpecError, PersonDirError


@pytest.mark.parametrize(
    "spec",
    [
        PersonSpec(uid=42),
        PersonSpec(email="a@b.com"),
        PersonSpec(login="alice"),
        PersonSpec(email="first.last+tag@example.org"),
    ],
)
def test_single_field_spec_round_trips(spec):
    """Test parse(path_component(spec)) reproduces the spec."""

    assert parse_person_spec(spec.path_component()) == spec


def test_uid_encoding():
    """Test a UID is encoded with the $ prefix."""

    assert PersonSpec(uid=42).path_component() == "$42"
    assert parse_person_spec("$42") == PersonSpec(uid=42)


def test_email_and_login_encoding():
    """Test emails and logins are used verbatim."""

    assert PersonSpec(email="a@b.com").path_component() == "a@b.com"
    assert parse_person_spec("a@b.com") == PersonSpec(email="a@b.com")
    assert PersonSpec(login="alice").path_component() == "alice"
    assert parse_person_spec("alice") == PersonSpec(login="alice")


def test_encoding_precedence_email_login_uid():
    """Test email wins over login, and login over uid."""

    assert PersonSpec(email="a@b.com", login="alice", uid=7).path_component() == "a@b.com"
    assert PersonSpec(login="alice", uid=7).path_component() == "alice"


def test_empty_spec_encoding_raises():
    """Test encoding an empty spec is rejected as a programming error."""

    with pytest.raises(EmptyPersonSpecError):
        PersonSpec().path_component()

    with pytest.raises(EmptyPersonSpecError):
        PersonSpec().route_vars()


def test_empty_spec_error_is_not_a_service_error():
    """Test the empty-spec error is not caught by service error handlers."""

    assert issubclass(EmptyPersonSpecError, ValueError)
    assert not issubclass(EmptyPersonSpecError, PersonDirError)


def test_negative_uid_is_not_encodable():
    """Test only positive UIDs have an encoding."""

    with pytest.raises(EmptyPersonSpecError):
        PersonSpec(uid=-3).path_component()


@pytest.mark.parametrize("text", ["$notanumber", "$", "$4x2", "$ 4"])
def test_parse_invalid_uid(text):
    """Test a malformed UID suffix raises with the zero-value spec attached."""

    with pytest.raises(InvalidPersonSpecError) as exc_info:
        parse_person_spec(text)

    assert exc_info.value.spec == PersonSpec()
    assert exc_info.value.text == text
    assert isinstance(exc_info.value, ValueError)


def test_parse_signed_uid():
    """Test an explicitly signed UID parses like a decimal integer."""

    assert parse_person_spec("$+5") == PersonSpec(uid=5)


def test_route_vars():
    """Test route vars carry the path component."""

    assert PersonSpec(login="bob").route_vars() == {"PersonSpec": "bob"}


def test_spec_is_immutable():
    """Test PersonSpec cannot be mutated after construction."""

    spec = PersonSpec(login="bob")
    with pytest.raises(ValidationError):
        spec.login = "alice"


def test_short_name():
    """Test short_name prefers login, then the email local part."""

    assert Person(spec=PersonSpec(login="bob")).short_name == "bob"
    assert Person(spec=PersonSpec(email="x@y.com")).short_name == "x"
    assert Person(spec=PersonSpec(email="")).short_name == "(anonymous)"
    assert Person(spec=PersonSpec(email="not-an-email")).short_name == "(anonymous)"
    assert Person(spec=PersonSpec(login="bob", email="x@y.com")).short_name == "bob"


def test_transient_and_has_profile():
    """Test transient is derived from the UID."""

    anonymous = Person(spec=PersonSpec(uid=0, email="x@y.com"))
    registered = Person(spec=PersonSpec(uid=7, login="bob"))

    assert anonymous.transient is True
    assert anonymous.has_profile is False
    assert registered.transient is False
    assert registered.has_profile is True


def test_person_from_flat_payload():
    """Test the flat API payload is lifted into an explicit spec."""

    person = Person.model_validate(
        {
            "Email": "bob@example.com",
            "Login": "bob",
            "UID": 7,
            "FullName": "Bob Example",
            "AvatarURL": "https://avatars.example.com/u/7",
        }
    )

    assert person.spec == PersonSpec(email="bob@example.com", login="bob", uid=7)
    assert person.login == "bob"
    assert person.email == "bob@example.com"
    assert person.uid == 7
    assert person.full_name == "Bob Example"
    assert person.avatar_url == "https://avatars.example.com/u/7"


def test_person_from_camel_case_payload():
    """Test the camelCase field names are accepted too."""

    person = Person.model_validate({"login": "alice", "uid": 3, "fullName": "Alice", "avatarURL": ""})

    assert person.spec == PersonSpec(login="alice", uid=3)
    assert person.full_name == "Alice"


def test_person_to_payload_round_trips():
    """Test the exported payload validates back to the same person."""

    person = Person(spec=PersonSpec(login="bob", uid=7), full_name="Bob", avatar_url="https://a.example/x")

    assert Person.model_validate(person.to_payload()) == person


def test_avatar_url_of_size():
    """Test the s query parameter is set, replacing any existing one."""

    person = Person(spec=PersonSpec(login="bob"), avatar_url="https://avatars.example.com/u/7?v=4&s=40")

    assert person.avatar_url_of_size(128) == "https://avatars.example.com/u/7?s=128&v=4"
    assert Person(avatar_url="https://a.example/x").avatar_url_of_size(32) == "https://a.example/x?s=32"


def test_avatar_url_of_size_without_avatar():
    """Test an empty avatar URL stays empty."""

    assert Person(spec=PersonSpec(login="bob")).avatar_url_of_size(64) == ""


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
def test_parse_uid_too_long():
    """Test a UID beyond the integer conversion limit is an invalid spec."""

    text = "$" + "1" * 5000

    with pytest.raises(InvalidPersonSpecError) as exc_info:
        parse_person_spec(text)

    assert exc_info.value.spec == PersonSpec()
