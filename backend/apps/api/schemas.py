from drf_spectacular.utils import OpenApiExample, OpenApiResponse
from rest_framework import serializers

from apps.api.openapi import error_example, validation_error_example


class ErrorDataSerializer(serializers.Serializer):
    errorCode = serializers.CharField()
    message = serializers.CharField()
    details = serializers.JSONField(required=False)
    timestamp = serializers.CharField()
    hint = serializers.CharField(required=False, allow_blank=True)
    extra = serializers.JSONField(required=False)


class ErrorEnvelopeSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=False)
    message = serializers.CharField()
    timestamp = serializers.CharField()
    statusCode = serializers.IntegerField()
    data = ErrorDataSerializer()


class SuccessEnvelopeSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=True)
    message = serializers.CharField()
    timestamp = serializers.CharField()
    statusCode = serializers.IntegerField()
    data = serializers.JSONField(allow_null=True)


def envelope_response(
    description: str, example_name: str, example: dict
) -> OpenApiResponse:
    return OpenApiResponse(
        response=ErrorEnvelopeSerializer,
        description=description,
        examples=[
            OpenApiExample(
                example_name,
                value=example,
                response_only=True,
                status_codes=[str(example["statusCode"])],
            )
        ],
    )


# Ready-made error responses for extend_schema(responses=...) on product endpoints
PRODUCT_ERROR_RESPONSES = {
    400: envelope_response(
        "Solicitud inválida", "Validation error", validation_error_example()
    ),
    404: envelope_response(
        "Recurso no encontrado",
        "Product not found",
        error_example(
            "PRODUCT_NOT_FOUND",
            "Producto no encontrado con ID: 123",
            "El producto solicitado no existe o ha sido eliminado",
            404,
        ),
    ),
    500: envelope_response(
        "Error interno del servidor",
        "Server error",
        error_example(
            "INTERNAL_SERVER_ERROR",
            "Ha ocurrido un error interno en el servidor",
            "Error inesperado durante el procesamiento",
            500,
        ),
    ),
}
