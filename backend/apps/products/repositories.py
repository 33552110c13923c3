from apps.common.repository import GenericRepository
from .models import Product


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def list(self, **filters):  # type: ignore[override]
        return self.model.objects.filter(**filters).order_by("id")

    def list_by_category(self, category: str, **filters):
        """Case-insensitive substring match on the category name."""
        return self.model.objects.filter(
            category__icontains=category, **filters
        ).order_by("id")
