class CardMaxError(Exception):
    pass


class CatalogError(CardMaxError):
    pass


class CardNotFoundError(CardMaxError, LookupError):
    pass


class RecommendationError(CardMaxError, ValueError):
    pass


class PurchaseParseError(RecommendationError):
    pass
