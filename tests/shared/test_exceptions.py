from app.shared.core.exceptions import (
    AIConfigurationError,
    AIResponseFormatError,
    APIAuthenticationError,
    APIRateLimitError,
    APITimeoutError,
    ExternalAPIError,
    PlantitasException,
    StageGraphError,
)


def test_to_dict():
    error = PlantitasException("Algo falló", status_code=418, details={"a": 1}, error_code="TEAPOT")

    assert error.to_dict() == {
        "error": {"code": "TEAPOT", "message": "Algo falló", "details": {"a": 1}, "status_code": 418}
    }


def test_default_error_code_is_class_name():
    assert PlantitasException("x").error_code == "PLANTITASEXCEPTION"


def test_external_api_error_details():
    error = ExternalAPIError("Server error", api_name="openai", api_status_code=503, api_response="down")

    assert error.status_code == 502
    assert error.error_code == "EXTERNAL_API_ERROR"
    assert error.details == {"api_name": "openai", "api_status_code": 503, "api_response": "down"}
    assert error.api_status_code == 503


def test_provider_error_hierarchy():
    for error in (APITimeoutError("openai", 45), APIAuthenticationError("openai"), APIRateLimitError("openai")):
        assert isinstance(error, ExternalAPIError)

    assert APITimeoutError("openai", 45).message == "openai API request timed out after 45 seconds"
    assert APIAuthenticationError("openai").status_code == 401
    assert APIRateLimitError("openai", retry_after="30").status_code == 429


def test_ai_errors():
    assert AIConfigurationError().message == "OpenAI API key not configured"
    assert AIConfigurationError().status_code == 500

    error = AIResponseFormatError("bad", raw_content="x" * 500)
    assert error.status_code == 502
    assert len(error.details["raw_content"]) == 200

    assert StageGraphError("cycle").error_code == "STAGE_GRAPH_ERROR"
