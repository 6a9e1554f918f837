"""
Tests for the error normalizer.

Exercises every error kind with hand-built exceptions and the shipped
message catalogs. No application or database required.
"""

import json

import pytest
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound
from starlette.exceptions import HTTPException

from app.domain.finance.errors import PersonNonexistentOrInactiveError
from app.shared.errors.causes import describe
from app.shared.errors.field_errors import field_errors_from
from app.shared.errors.normalizer import (
    HANDLED_EXCEPTIONS,
    RULES,
    ErrorEntry,
    ErrorKind,
    classify,
    normalize,
)
from app.shared.i18n.message_source import MessageSource, NoSuchMessageError


def _malformed() -> RequestValidationError:
    return RequestValidationError(
        [
            {
                "type": "json_invalid",
                "loc": ("body", 1),
                "msg": "JSON decode error",
                "input": {},
                "ctx": {"error": "Expecting property name enclosed in double quotes"},
            }
        ]
    )


def _invalid_entry_fields() -> RequestValidationError:
    return RequestValidationError(
        [
            {
                "type": "string_too_short",
                "loc": ("body", "description"),
                "msg": "String should have at least 5 characters",
                "input": "abc",
                "ctx": {"min_length": 5},
            },
            {
                "type": "greater_than",
                "loc": ("body", "amount"),
                "msg": "Input should be greater than 0",
                "input": -1,
                "ctx": {"gt": 0},
            },
        ]
    )


class TestClassification:
    """Tests for mapping exceptions to error kinds."""

    def test_json_invalid_is_malformed_request(self) -> None:
        assert classify(_malformed()) is ErrorKind.MALFORMED_REQUEST

    def test_other_request_validation_is_field_validation(self) -> None:
        assert classify(_invalid_entry_fields()) is ErrorKind.FIELD_VALIDATION

    def test_storage_and_domain_errors(self) -> None:
        assert classify(NoResultFound()) is ErrorKind.RESOURCE_NOT_FOUND
        assert (
            classify(IntegrityError("DELETE FROM people", {}, ValueError("fk")))
            is ErrorKind.INTEGRITY_VIOLATION
        )
        assert (
            classify(PersonNonexistentOrInactiveError(1))
            is ErrorKind.DOMAIN_ENTITY_INVALID
        )

    def test_unrecognized_kind(self) -> None:
        assert classify(ValueError("boom")) is None

    def test_every_kind_has_exactly_one_rule(self) -> None:
        assert set(RULES) == set(ErrorKind)

    def test_rule_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            RULES[ErrorKind.RESOURCE_NOT_FOUND] = RULES[ErrorKind.MALFORMED_REQUEST]  # type: ignore[index]

    def test_handled_exceptions_cover_classified_types(self) -> None:
        for exc_type in (RequestValidationError, NoResultFound, IntegrityError, PersonNonexistentOrInactiveError):
            assert exc_type in HANDLED_EXCEPTIONS

    def test_whole_body_rejection_is_malformed_request(self) -> None:
        empty = RequestValidationError(
            [{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}]
        )
        not_an_object = RequestValidationError(
            [
                {
                    "type": "model_attributes_type",
                    "loc": ("body",),
                    "msg": "Input should be a valid dictionary or object to extract fields from",
                    "input": [1],
                }
            ]
        )
        assert classify(empty) is ErrorKind.MALFORMED_REQUEST
        assert classify(not_an_object) is ErrorKind.MALFORMED_REQUEST

    def test_body_parse_http_exception_is_malformed_request(self) -> None:
        exc = HTTPException(status_code=400, detail="There was an error parsing the body")
        assert classify(exc) is ErrorKind.MALFORMED_REQUEST
        assert HTTPException in HANDLED_EXCEPTIONS

    def test_other_http_exceptions_are_not_claimed(self) -> None:
        assert classify(HTTPException(status_code=404)) is None
        assert classify(HTTPException(status_code=400, detail="Bad header")) is None


class TestMalformedRequest:
    """Tests for unparseable request bodies."""

    def test_status_and_user_message(self, messages: MessageSource) -> None:
        result = normalize(_malformed(), messages, "en")
        assert result.status_code == 400
        assert len(result.entries) == 1
        assert result.entries[0].user_message == "Invalid message"

    def test_developer_message_uses_parse_cause(self, messages: MessageSource) -> None:
        cause = json.JSONDecodeError("Expecting value", "{bad", 1)
        exc = _malformed()
        exc.__cause__ = cause

        result = normalize(exc, messages, "en")

        assert result.entries[0].developer_message == describe(cause)
        assert result.entries[0].developer_message.startswith("json.decoder.JSONDecodeError")

    def test_developer_message_without_cause(self, messages: MessageSource) -> None:
        exc = _malformed()
        result = normalize(exc, messages, "en")
        assert result.entries[0].developer_message == describe(exc)
        assert result.entries[0].developer_message.startswith(
            "fastapi.exceptions.RequestValidationError"
        )

    def test_undecodable_body_uses_decode_cause(self, messages: MessageSource) -> None:
        cause = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        exc = HTTPException(status_code=400, detail="There was an error parsing the body")
        exc.__cause__ = cause

        result = normalize(exc, messages, "en")

        assert result.status_code == 400
        assert result.entries[0].user_message == "Invalid message"
        assert result.entries[0].developer_message.startswith("UnicodeDecodeError")


class TestFieldValidation:
    """Tests for field and argument validation failures."""

    def test_one_entry_per_field_in_order(self, messages: MessageSource) -> None:
        result = normalize(_invalid_entry_fields(), messages, "en")
        assert result.status_code == 400
        assert [entry.user_message for entry in result.entries] == [
            "Description must have at least 5 characters",
            "Amount must be greater than 0",
        ]

    def test_developer_message_is_field_descriptor(self, messages: MessageSource) -> None:
        exc = _invalid_entry_fields()
        result = normalize(exc, messages, "en")
        descriptors = [str(field_error) for field_error in field_errors_from(exc)]
        assert [entry.developer_message for entry in result.entries] == descriptors
        assert "on field 'description'" in descriptors[0]
        assert "rejected value ['abc']" in descriptors[0]
        assert "min_length=5" in descriptors[0]

    def test_field_error_arguments_are_read_only(self) -> None:
        field_error = field_errors_from(_invalid_entry_fields())[0]
        assert field_error.arguments == {"min_length": 5}
        with pytest.raises(TypeError):
            field_error.arguments["min_length"] = 1  # type: ignore[index]

    def test_localized_per_field(self, messages: MessageSource) -> None:
        result = normalize(_invalid_entry_fields(), messages, "pt_BR")
        assert [entry.user_message for entry in result.entries] == [
            "Descrição deve ter no mínimo 5 caracteres",
            "Valor deve ser maior que 0",
        ]

    def test_same_field_twice_is_not_deduplicated(self, messages: MessageSource) -> None:
        exc = RequestValidationError(
            [
                {"type": "string_too_short", "loc": ("body", "name"), "msg": "too short", "input": "", "ctx": {"min_length": 3}},
                {"type": "string_pattern_mismatch", "loc": ("body", "name"), "msg": "String should match pattern", "input": "", "ctx": {"pattern": "^[A-Z]"}},
            ]
        )
        result = normalize(exc, messages, "en")
        assert len(result.entries) == 2
        assert result.entries[1].user_message == "String should match pattern"

    def test_no_field_errors_still_yields_an_entry(self, messages: MessageSource) -> None:
        result = normalize(RequestValidationError([]), messages, "en")
        assert result.kind is ErrorKind.FIELD_VALIDATION
        assert len(result.entries) == 1
        assert result.entries[0].user_message == "Invalid message"


class TestStorageErrors:
    """Tests for missing rows and constraint violations."""

    def test_not_found(self, messages: MessageSource) -> None:
        result = normalize(NoResultFound("No row was found when one was required"), messages, "en")
        assert result.status_code == 404
        assert len(result.entries) == 1
        assert result.entries[0].user_message == "Resource not found"
        assert result.entries[0].developer_message.startswith(
            "sqlalchemy.exc.NoResultFound: No row was found"
        )

    def test_not_found_with_cause(self, messages: MessageSource) -> None:
        exc = NoResultFound("No row was found when one was required")
        exc.__cause__ = KeyError(42)
        result = normalize(exc, messages, "en")
        assert result.entries[0].developer_message == "KeyError: 42"

    def test_integrity_violation_uses_deepest_cause(self, messages: MessageSource) -> None:
        deepest = ValueError("FOREIGN KEY constraint failed")
        middle = RuntimeError("driver rejected statement")
        middle.__cause__ = deepest
        exc = IntegrityError("DELETE FROM people WHERE id = ?", (1,), middle)

        result = normalize(exc, messages, "en")

        assert result.status_code == 400
        assert result.entries[0].user_message == "Operation not allowed"
        assert result.entries[0].developer_message == "FOREIGN KEY constraint failed"

    def test_localized_not_found(self, messages: MessageSource) -> None:
        result = normalize(NoResultFound(), messages, "pt_BR")
        assert result.entries[0].user_message == "Recurso não encontrado"


class TestDomainEntityInvalid:
    """Tests for entries referencing unusable people."""

    def test_status_and_messages(self, messages: MessageSource) -> None:
        exc = PersonNonexistentOrInactiveError(7)
        result = normalize(exc, messages, "en")
        assert result.status_code == 400
        assert result.entries == (
            ErrorEntry(
                user_message="Person does not exist or is inactive",
                developer_message=(
                    "app.domain.finance.errors.PersonNonexistentOrInactiveError: "
                    "Person 7 does not exist or is inactive"
                ),
            ),
        )


class TestUnrecognized:
    """Tests for exceptions left to the framework."""

    def test_returns_none(self, messages: MessageSource) -> None:
        assert normalize(RuntimeError("unexpected"), messages, "en") is None


class TestBody:
    """Tests for the serialized response body."""

    @pytest.mark.parametrize(
        "exc",
        [
            _malformed(),
            _invalid_entry_fields(),
            NoResultFound(),
            IntegrityError("INSERT", {}, ValueError("unique")),
            PersonNonexistentOrInactiveError(3),
        ],
    )
    def test_json_round_trip(self, messages: MessageSource, exc: BaseException) -> None:
        body = json.loads(json.dumps(normalize(exc, messages, "en").to_content()))
        assert body
        for item in body:
            assert set(item) == {"userMessage", "developerMessage"}
            assert isinstance(item["userMessage"], str)
            assert isinstance(item["developerMessage"], str)

    def test_missing_catalog_message_propagates(self, tmp_path) -> None:
        (tmp_path / "messages.yml").write_text('invalid.message: "Invalid"\n', encoding="utf-8")
        source = MessageSource(tmp_path)
        with pytest.raises(NoSuchMessageError):
            normalize(NoResultFound(), source, "en")
