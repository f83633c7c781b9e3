"""Domínio — DTOs trocados com o backend da loja.

Registros efêmeros: nada aqui é persistido pelo cliente.
"""

from app.domain.base import HealthStatus, Pagination, StorefrontModel, to_query_params
from app.domain.cart import Cart, CartItem, CartSummary
from app.domain.catalog import (
    Category,
    CategoryList,
    CouponInput,
    Slide,
    SlideInput,
    SlideList,
)
from app.domain.order import OrderInput, OrderItemInput, OrderSummary, ShippingAddress
from app.domain.payment import (
    CardPayer,
    CardPaymentRequest,
    PayerIdentification,
    PaymentKind,
    PaymentResponse,
    PaymentStatusResponse,
    PixPayer,
    PixPaymentRequest,
)
from app.domain.product import (
    Brand,
    Product,
    ProductDetail,
    ProductFilters,
    ProductImage,
    ProductList,
)
from app.domain.shipping import DeliveryRange, ShippingOption, ShippingProduct
from app.domain.user import (
    AddressInput,
    AdminUserList,
    AuthResult,
    ProfileResponse,
    ProfileUpdate,
    RegisterInput,
    User,
    UserAddress,
)

__all__ = [
    "AddressInput",
    "AdminUserList",
    "AuthResult",
    "Brand",
    "CardPayer",
    "CardPaymentRequest",
    "Cart",
    "CartItem",
    "CartSummary",
    "Category",
    "CategoryList",
    "CouponInput",
    "DeliveryRange",
    "HealthStatus",
    "OrderInput",
    "OrderItemInput",
    "OrderSummary",
    "Pagination",
    "PayerIdentification",
    "PaymentKind",
    "PaymentResponse",
    "PaymentStatusResponse",
    "PixPayer",
    "PixPaymentRequest",
    "Product",
    "ProductDetail",
    "ProductFilters",
    "ProductImage",
    "ProductList",
    "ProfileResponse",
    "ProfileUpdate",
    "RegisterInput",
    "ShippingAddress",
    "ShippingOption",
    "ShippingProduct",
    "Slide",
    "SlideInput",
    "SlideList",
    "StorefrontModel",
    "User",
    "UserAddress",
    "to_query_params",
]
