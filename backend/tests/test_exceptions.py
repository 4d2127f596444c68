"""
Sample App Backend — Exception and Error Mapping Tests
========================================================

What:  Tests for the exception classes and for the translation of FastAPI's
       RequestValidationError into our 400 messages.
"""

from fastapi.exceptions import RequestValidationError

from sample_app.exceptions import NotFoundError, SampleAppError, ValidationError
from sample_app.main import describe_validation_error


class TestExceptionClasses:

    def test_validation_error_records_field(self):
        exc = ValidationError(message="Field 'text' is required", field="text")

        assert isinstance(exc, SampleAppError)
        assert exc.message == "Field 'text' is required"
        assert exc.field == "text"
        assert exc.context == {"field": "text"}
        assert str(exc) == "Field 'text' is required"

    def test_not_found_message(self):
        exc = NotFoundError(method="GET", path="/nowhere")

        assert isinstance(exc, SampleAppError)
        assert exc.message == "Route GET /nowhere not found"
        assert exc.context == {"method": "GET", "path": "/nowhere"}

    def test_base_defaults(self):
        exc = SampleAppError()
        assert exc.message == "An unexpected error occurred"
        assert exc.context == {}


class TestDescribeValidationError:

    def test_missing_field(self):
        exc = RequestValidationError(
            [{"type": "missing", "loc": ("body", "text"), "msg": "Field required", "input": {}}]
        )

        error = describe_validation_error(exc)

        assert error.message == "Field 'text' is required"
        assert error.field == "text"

    def test_wrong_type(self):
        exc = RequestValidationError(
            [{"type": "string_type", "loc": ("body", "text"), "msg": "Input should be a valid string", "input": 5}]
        )

        assert describe_validation_error(exc).message == "Field 'text' must be a string"

    def test_missing_body(self):
        exc = RequestValidationError(
            [{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}]
        )

        error = describe_validation_error(exc)

        assert error.field is None
        assert "JSON object" in error.message

    def test_invalid_json(self):
        exc = RequestValidationError(
            [{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error", "input": {}}]
        )

        assert describe_validation_error(exc).message == "Request body must be valid JSON"

    def test_other_error_uses_pydantic_message(self):
        exc = RequestValidationError(
            [{"type": "string_too_long", "loc": ("body", "text"), "msg": "String too long", "input": "x"}]
        )

        assert describe_validation_error(exc).message == "Field 'text': String too long"

    def test_no_errors(self):
        assert describe_validation_error(RequestValidationError([])).message == "Invalid request"
