from typing import Any


class CurrencyCode:
    """
    Canonical form of a currency code as used for precision lookups.

    Codes are never checked against an enumeration here: an exotic or
    malformed code still canonicalizes and simply resolves to the default
    precision further down.
    """

    @staticmethod
    def canonicalize(code: Any) -> str:
        if code is None:
            return ""

        return str(code).strip().upper()
