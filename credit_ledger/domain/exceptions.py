"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AccountNotFoundError(DomainException):
    """No account is registered under the requested name"""

    pass


class WishlistItemNotFoundError(DomainException):
    """No wishlist item or acquisition with the requested id"""

    pass


class DuplicateAccountError(DomainException):
    """An account with the same name already exists"""

    pass


class InvalidMonthKeyError(DomainException):
    """Month key (or flat overlay key) is not in YYYY-MM form"""

    pass
