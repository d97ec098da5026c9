from exact_money.currency.currency import Currency, CurrencyType
from exact_money.locale import Locale


BTC = Currency("BTC", "Bitcoin", "₿", 8, Locale.EN_US, True, currency_type=CurrencyType.CRYPTO)
ETH = Currency("ETH", "Ethereum", "ETH", 18, Locale.EN_US, False, currency_type=CurrencyType.CRYPTO)
LTC = Currency("LTC", "Litecoin", "Ł", 8, Locale.EN_US, True, currency_type=CurrencyType.CRYPTO)
XRP = Currency("XRP", "XRP", "XRP", 6, Locale.EN_US, False, currency_type=CurrencyType.CRYPTO)
SOL = Currency("SOL", "Solana", "◎", 9, Locale.EN_US, True, currency_type=CurrencyType.CRYPTO)

# Stablecoins
USDC = Currency("USDC", "USD Coin", "USDC", 6, Locale.EN_US, False, currency_type=CurrencyType.CRYPTO)
USDT = Currency("USDT", "Tether", "USDT", 6, Locale.EN_US, False, currency_type=CurrencyType.CRYPTO)
DAI = Currency("DAI", "Dai", "DAI", 18, Locale.EN_US, False, currency_type=CurrencyType.CRYPTO)

ALL: tuple[Currency, ...] = (BTC, ETH, LTC, XRP, SOL, USDC, USDT, DAI)

# Register all predefined currencies
for _currency in ALL:
    Currency.register(_currency, overwrite=True)
