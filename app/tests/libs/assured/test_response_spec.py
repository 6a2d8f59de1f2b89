import pytest

from libs.assured import Response, ResponseSpecification
from libs.assured.exceptions import ResponseValidationError
from libs.assured.request_spec import RequestSpecification

GREETING = {"greeting": {"firstName": "John", "lastName": "Doe"}}


class TestThen:
    def test_passing_expectations(self):
        response = Response.of(200, GREETING)
        (
            response.then()
            .status_code(200)
            .status_line("HTTP/1.1 200 OK")
            .content_type("application/json")
            .body("greeting.firstName", "John", "greeting.lastName", "Doe")
        )

    def test_failure_is_raised_immediately(self):
        response = Response.of(409, "ERROR", content_type="text/plain")
        with pytest.raises(ResponseValidationError) as exc_info:
            response.then().status_code(200)

        assert "Expected status code <200> but was <409>." in str(exc_info.value)
        assert isinstance(exc_info.value, AssertionError)

    def test_root_prefixes_paths(self):
        Response.of(200, GREETING).then().root("greeting").body("firstName", "John").body("lastName", "Doe")

    def test_predicate(self):
        Response.of(201).then().status_code(lambda code: 200 <= code < 300)

    def test_whole_body(self):
        Response.of(200, "OK", content_type="text/plain").then().body("OK")

    def test_header(self):
        Response.of(200, headers={"X-Trace": "abc"}).then().header("X-Trace", "abc")

    def test_content_type_is_prefix_match(self):
        Response.of(200, "x", content_type="text/plain; charset=utf-8").then().content_type("TEXT/PLAIN")

    def test_xml_body(self):
        response = Response.of(200, "<greeting><firstName>John</firstName></greeting>", content_type="application/xml")
        response.then().body("greeting.firstName", "John")

    def test_body_rejects_odd_arguments(self):
        with pytest.raises(TypeError):
            Response.of(200).then().body("a", 1, "b")


class TestExpect:
    def test_expectations_are_deferred(self):
        spec = ResponseSpecification().status_code(200).body("greeting.firstName", "Jane")
        assert len(spec.expectations) == 2

        with pytest.raises(ResponseValidationError) as exc_info:
            spec.validate(Response.of(404, GREETING))

        error = exc_info.value
        assert len(error.failures) == 2
        assert str(error).startswith("2 expectations failed.")

    def test_validate_returns_response(self):
        response = Response.of(200)
        spec = ResponseSpecification().status_code(200)
        assert spec.validate(response) is response
        assert spec.response is response

    def test_merge(self):
        spec = ResponseSpecification().status_code(200)
        spec.merge(ResponseSpecification().header("X-Trace", "abc").root("greeting"))
        assert len(spec.expectations) == 2

    def test_copy_is_independent(self):
        spec = ResponseSpecification().status_code(200)
        clone = spec.copy()
        clone.status_code(201)
        assert len(spec.expectations) == 1

    def test_when_returns_attached_request_spec(self):
        request_spec = RequestSpecification()
        assert request_spec.expect().when() is request_spec

    def test_when_without_request_spec(self):
        with pytest.raises(TypeError):
            ResponseSpecification().when()
