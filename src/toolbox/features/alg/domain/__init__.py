from .errors import EmptyInputError
from .ordering import CompareFunc, SupportsLessThan, key_order, natural_order, reverse_order

__all__ = [
    "CompareFunc",
    "EmptyInputError",
    "SupportsLessThan",
    "key_order",
    "natural_order",
    "reverse_order",
]
