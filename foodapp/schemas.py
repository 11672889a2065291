"""
Pydantic Schemas for Session State and Request Bodies

- UserSummary / Session: what the session store holds
- AuthResponse: envelope returned by /auth/login and /auth/register
- *Create / *Update: request bodies accepted by the resource calls

Request schemas allow extra fields so any field the backend understands
can be passed through.

Author: Khalil Bannouri
Version: 1.0.0
"""

from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator
from typing import Optional, List, Union
from enum import Enum
import re


# =============================================================================
# ENUMS
# =============================================================================

class RoleEnum(str, Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# =============================================================================
# SESSION SCHEMAS
# =============================================================================

class UserSummary(BaseModel):
    """Profile snapshot stored alongside the token."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[Union[str, int]] = Field(
        None, validation_alias=AliasChoices("id", "_id")
    )
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = Field(None, examples=["admin", "customer"])


class Session(BaseModel):
    """Current session: a token and the user it was issued for."""
    token: Optional[str] = None
    user: Optional[UserSummary] = None

    @property
    def is_empty(self) -> bool:
        return self.token is None and self.user is None


class AuthResponse(BaseModel):
    """Successful login/register payload."""
    model_config = ConfigDict(extra="allow")

    token: str = Field(..., min_length=1)
    user: dict


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class LoginRequest(BaseModel):
    """Credentials for /auth/login."""
    email: str
    password: str


class RegisterRequest(BaseModel):
    """Registration fields for /auth/register."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, max_length=100, examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])
    password: str = Field(..., min_length=1)
    phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not re.match(r'^[\w\.\+-]+@[\w\.-]+\.\w+$', v):
            raise ValueError('Invalid email format')
        return v


class RestaurantCreate(BaseModel):
    """Fields for creating a restaurant (admin)."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, max_length=100, examples=["AI Pizza Palace"])
    description: Optional[str] = Field(None, max_length=1000)
    cuisine: Optional[str] = Field(None, examples=["Italian"])
    address: Optional[str] = None
    image: Optional[str] = None


class MenuItemCreate(BaseModel):
    """Fields for creating a menu item (admin)."""
    model_config = ConfigDict(extra="allow")

    restaurant: str = Field(..., min_length=1, description="Restaurant id")
    name: str = Field(..., min_length=1, max_length=100, examples=["Pizza Margherita"])
    price: float = Field(..., gt=0, examples=[14.99])
    description: Optional[str] = Field(None, max_length=500)
    category: Optional[str] = None
    image: Optional[str] = None


class OrderItemCreate(BaseModel):
    """Single line of an order."""
    model_config = ConfigDict(extra="allow")

    menuItem: str = Field(..., min_length=1, description="Menu item id")
    quantity: int = Field(..., ge=1, le=99, examples=[2])
    price: Optional[float] = Field(None, gt=0)
    name: Optional[str] = None


class OrderCreate(BaseModel):
    """Fields for placing an order."""
    model_config = ConfigDict(extra="allow")

    restaurant: str = Field(..., min_length=1, description="Restaurant id")
    items: List[OrderItemCreate] = Field(..., min_length=1)
    deliveryAddress: Optional[str] = Field(None, max_length=255)
    totalAmount: Optional[float] = Field(None, ge=0)

    @property
    def computed_total(self) -> Optional[float]:
        """Sum of priced lines, or None when any line has no price."""
        if any(item.price is None for item in self.items):
            return None
        return round(sum(item.price * item.quantity for item in self.items), 2)


class ProfileUpdate(BaseModel):
    """Editable profile fields."""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
