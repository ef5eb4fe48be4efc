from dataclasses import dataclass
from typing import Union


@dataclass
class Product:
    """
    Product record held by the in-memory store.

    Attributes:
        id: Server-assigned unique identifier (UUID4 string), never changes
        name: Product name
        description: Free-form description
        price: Product price (non-negative)
        category: Category label, matched case-insensitively when filtering
        in_stock: Whether the product is currently available
    """
    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool

    def __repr__(self):
        return f"<Product(id='{self.id}', name='{self.name}', category='{self.category}')>"
