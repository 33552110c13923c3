from decimal import Decimal

from rest_framework import serializers

from .dtos import CreateProductDTO, UpdateProductDTO

NAME_ERRORS = {
    "required": "El nombre del producto es obligatorio",
    "blank": "El nombre del producto es obligatorio",
    "null": "El nombre del producto es obligatorio",
    "min_length": "El nombre debe tener entre 2 y 100 caracteres",
    "max_length": "El nombre debe tener entre 2 y 100 caracteres",
}
DESCRIPTION_ERRORS = {
    "required": "La descripción es obligatoria",
    "blank": "La descripción es obligatoria",
    "null": "La descripción es obligatoria",
    "max_length": "La descripción no puede exceder 500 caracteres",
}
PRICE_ERRORS = {
    "required": "El precio es obligatorio",
    "null": "El precio es obligatorio",
    "invalid": "El precio debe ser un número válido",
    "min_value": "El precio debe ser mayor a 0",
    "max_digits": "El precio debe tener máximo 8 enteros y 2 decimales",
    "max_whole_digits": "El precio debe tener máximo 8 enteros y 2 decimales",
    "max_decimal_places": "El precio debe tener máximo 8 enteros y 2 decimales",
}
CATEGORY_ERRORS = {
    "required": "La categoría es obligatoria",
    "blank": "La categoría es obligatoria",
    "null": "La categoría es obligatoria",
    "max_length": "La categoría no puede exceder 50 caracteres",
}
STOCK_ERRORS = {
    "required": "El stock es obligatorio",
    "null": "El stock es obligatorio",
    "invalid": "El stock debe ser un número entero",
    "min_value": "El stock no puede ser negativo",
}

MIN_PRICE = Decimal("0.01")


class ProductCreateSerializer(serializers.Serializer):
    # Payload for creating products. 'id' and 'active' are server-controlled
    # and not accepted from clients.
    name = serializers.CharField(
        min_length=2, max_length=100, error_messages=NAME_ERRORS
    )
    description = serializers.CharField(
        max_length=500, error_messages=DESCRIPTION_ERRORS
    )
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=MIN_PRICE,
        error_messages=PRICE_ERRORS,
    )
    category = serializers.CharField(max_length=50, error_messages=CATEGORY_ERRORS)
    stock = serializers.IntegerField(min_value=0, error_messages=STOCK_ERRORS)

    def to_dto(self) -> CreateProductDTO:
        return CreateProductDTO(**self.validated_data)


class ProductUpdateSerializer(serializers.Serializer):
    # Partial patch: omitted or null fields are left unchanged.
    name = serializers.CharField(
        min_length=2,
        max_length=100,
        required=False,
        allow_null=True,
        error_messages=NAME_ERRORS,
    )
    description = serializers.CharField(
        max_length=500,
        required=False,
        allow_null=True,
        error_messages=DESCRIPTION_ERRORS,
    )
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=MIN_PRICE,
        required=False,
        allow_null=True,
        error_messages=PRICE_ERRORS,
    )
    category = serializers.CharField(
        max_length=50,
        required=False,
        allow_null=True,
        error_messages=CATEGORY_ERRORS,
    )
    stock = serializers.IntegerField(
        min_value=0, required=False, allow_null=True, error_messages=STOCK_ERRORS
    )

    def to_dto(self) -> UpdateProductDTO:
        return UpdateProductDTO(
            **{name: self.validated_data.get(name) for name in self.fields}
        )


class ProductReadSerializer(serializers.Serializer):
    # Matches ProductDTO shapes used for responses
    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    category = serializers.CharField()
    stock = serializers.IntegerField()
    active = serializers.BooleanField()
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)

    def to_representation(self, instance):
        if instance is None:
            return None
        return super().to_representation(instance)
