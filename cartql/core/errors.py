"""Domain errors raised by the cart service"""


class CartQLError(Exception):
    """Base exception for cart and order operations"""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict:
        # graphql-core copies this onto the GraphQL error it builds
        return {"code": self.code}


class NotFoundError(CartQLError):
    """A cart, item or order does not exist"""

    code = "NOT_FOUND"


class ValidationError(CartQLError):
    """Input failed validation"""

    code = "BAD_USER_INPUT"


class ConflictError(CartQLError):
    """The operation conflicts with the current state"""

    code = "CONFLICT"
