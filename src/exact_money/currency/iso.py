from exact_money.currency.currency import Currency
from exact_money.locale import Locale


# Americas
USD = Currency("USD", "United States Dollar", "$", 2, Locale.EN_US, True, 1, 840)
CAD = Currency("CAD", "Canadian Dollar", "$", 2, Locale.EN_US, True, 5, 124)
MXN = Currency("MXN", "Mexican Peso", "$", 2, Locale.EN_US, True, 5, 484)
BRL = Currency("BRL", "Brazilian Real", "R$", 2, Locale.EN_EU, True, 5, 986)
CLP = Currency("CLP", "Chilean Peso", "$", 0, Locale.EN_EU, True, 1, 152)

# Europe
EUR = Currency("EUR", "Euro", "€", 2, Locale.EN_EU, True, 1, 978)
GBP = Currency("GBP", "British Pound", "£", 2, Locale.EN_US, True, 1, 826)
CHF = Currency("CHF", "Swiss Franc", "Fr", 2, Locale.EN_US, False, 5, 756)
SEK = Currency("SEK", "Swedish Krona", "kr", 2, Locale.EN_BY, False, 100, 752)
NOK = Currency("NOK", "Norwegian Krone", "kr", 2, Locale.EN_BY, False, 100, 578)
DKK = Currency("DKK", "Danish Krone", "kr.", 2, Locale.EN_EU, False, 50, 208)
ISK = Currency("ISK", "Icelandic Krona", "kr", 0, Locale.EN_EU, False, 1, 352)
PLN = Currency("PLN", "Polish Zloty", "zł", 2, Locale.EN_BY, False, 1, 985)
CZK = Currency("CZK", "Czech Koruna", "Kč", 2, Locale.EN_BY, False, 100, 203)
HUF = Currency("HUF", "Hungarian Forint", "Ft", 2, Locale.EN_BY, False, 500, 348)
BYN = Currency("BYN", "Belarusian Ruble", "Br", 2, Locale.EN_BY, False, 1, 933)
RUB = Currency("RUB", "Russian Ruble", "₽", 2, Locale.EN_BY, False, 1, 643)

# Asia and Pacific
JPY = Currency("JPY", "Japanese Yen", "¥", 0, Locale.EN_US, True, 1, 392)
CNY = Currency("CNY", "Chinese Renminbi Yuan", "¥", 2, Locale.EN_US, True, 1, 156)
KRW = Currency("KRW", "South Korean Won", "₩", 0, Locale.EN_US, True, 1, 410)
INR = Currency("INR", "Indian Rupee", "₹", 2, Locale.EN_IN, True, 50, 356)
SGD = Currency("SGD", "Singapore Dollar", "$", 2, Locale.EN_US, True, 1, 702)
HKD = Currency("HKD", "Hong Kong Dollar", "$", 2, Locale.EN_US, True, 10, 344)
AUD = Currency("AUD", "Australian Dollar", "$", 2, Locale.EN_US, True, 5, 36)
NZD = Currency("NZD", "New Zealand Dollar", "$", 2, Locale.EN_US, True, 10, 554)

# Middle East and Africa
AED = Currency("AED", "United Arab Emirates Dirham", "د.إ", 2, Locale.EN_US, False, 25, 784)
BHD = Currency("BHD", "Bahraini Dinar", "ب.د", 3, Locale.EN_US, True, 5, 48)
KWD = Currency("KWD", "Kuwaiti Dinar", "د.ك", 3, Locale.EN_US, True, 5, 414)
ZAR = Currency("ZAR", "South African Rand", "R", 2, Locale.EN_US, True, 10, 710)

ALL: tuple[Currency, ...] = (
    USD, CAD, MXN, BRL, CLP,
    EUR, GBP, CHF, SEK, NOK, DKK, ISK, PLN, CZK, HUF, BYN, RUB,
    JPY, CNY, KRW, INR, SGD, HKD, AUD, NZD,
    AED, BHD, KWD, ZAR,
)

# Register all predefined currencies
for _currency in ALL:
    Currency.register(_currency, overwrite=True)
