from django.conf import settings

from apps.api import openapi
from apps.api.schemas import PRODUCT_ERROR_RESPONSES, ErrorEnvelopeSerializer


def test_settings_expose_api_metadata():
    spectacular = settings.SPECTACULAR_SETTINGS
    assert spectacular["TITLE"] == "Products API - Tutorial"
    assert spectacular["VERSION"] == "2.0"
    assert spectacular["LICENSE"]["name"] == "MIT License"
    assert len(spectacular["SERVERS"]) == 3


def test_components_declare_reusable_responses_and_schemas():
    components = openapi.build_spectacular_settings()["APPEND_COMPONENTS"]
    assert set(components["responses"]) == {
        "NotFound",
        "BadRequest",
        "InternalServerError",
        "Unauthorized",
        "Forbidden",
    }
    assert set(components["schemas"]) == {"ValidationError", "BusinessError"}
    assert components["securitySchemes"]["ApiKey"]["name"] == "X-API-Key"
    assert components["securitySchemes"]["BearerAuthentication"]["scheme"] == "bearer"


def test_error_example_follows_envelope():
    example = openapi.error_example("FORBIDDEN", "No permitido", "Sin acceso", 403)
    assert example["success"] is False
    assert example["statusCode"] == 403
    assert example["data"]["errorCode"] == "FORBIDDEN"
    assert example["data"]["details"] == {"info": "Sin acceso"}


def test_bad_request_example_lists_field_details():
    responses = openapi.build_responses()
    example = responses["BadRequest"]["content"]["application/json"]["example"]
    assert example["statusCode"] == 400
    assert set(example["data"]["details"]) == {"name", "price", "category"}


def test_not_found_example_uses_its_own_status():
    responses = openapi.build_responses()
    example = responses["NotFound"]["content"]["application/json"]["example"]
    assert example["statusCode"] == 404
    assert example["data"]["errorCode"] == "PRODUCT_NOT_FOUND"


def test_product_error_responses_wrap_envelope_serializer():
    assert set(PRODUCT_ERROR_RESPONSES) == {400, 404, 500}
    for status_code, response in PRODUCT_ERROR_RESPONSES.items():
        assert response.response is ErrorEnvelopeSerializer
        assert response.examples[0].value["statusCode"] == status_code


def test_envelope_serializer_accepts_example_payload():
    serializer = ErrorEnvelopeSerializer(data=openapi.validation_error_example())
    assert serializer.is_valid(), serializer.errors
