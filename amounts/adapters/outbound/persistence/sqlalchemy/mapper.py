from amounts.adapters.outbound.persistence.sqlalchemy.models import CurrencyModel
from amounts.domain.models import Currency


class SQLAlchemyMapper:
    @staticmethod
    def db_model_to_currency(db_model: CurrencyModel) -> Currency:
        # These columns are non-nullable, but mypy thinks otherwise
        return Currency(
            code=db_model.code,  # type: ignore [arg-type]
            name=db_model.name,  # type: ignore [arg-type]
            symbol=db_model.symbol,  # type: ignore [arg-type]
            decimals=db_model.decimals,  # type: ignore [arg-type]
            is_active=db_model.is_active,  # type: ignore [arg-type]
        )

    @staticmethod
    def currency_to_dict(currency: Currency) -> dict[str, str | int | bool]:
        return {
            "code": currency.code,
            "name": currency.name,
            "symbol": currency.symbol,
            "decimals": currency.decimals,
            "is_active": currency.is_active,
        }
