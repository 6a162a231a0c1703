"""Static currency reference data"""

from enum import Enum
from typing import NamedTuple


class CurrencyCode(str, Enum):
    """Closed set of ISO-style currency codes accepted by carts"""
    AED = "AED"
    AFN = "AFN"
    ALL = "ALL"
    AMD = "AMD"
    ANG = "ANG"
    AOA = "AOA"
    ARS = "ARS"
    AUD = "AUD"
    AWG = "AWG"
    AZN = "AZN"
    BAM = "BAM"
    BBD = "BBD"
    BDT = "BDT"
    BGN = "BGN"
    BHD = "BHD"
    BIF = "BIF"
    BMD = "BMD"
    BND = "BND"
    BOB = "BOB"
    BRL = "BRL"
    BSD = "BSD"
    BTC = "BTC"
    BTN = "BTN"
    BWP = "BWP"
    BYR = "BYR"
    BZD = "BZD"
    CAD = "CAD"
    CDF = "CDF"
    CHF = "CHF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    CRC = "CRC"
    CUC = "CUC"
    CUP = "CUP"
    CVE = "CVE"
    CZK = "CZK"
    DJF = "DJF"
    DKK = "DKK"
    DOP = "DOP"
    DZD = "DZD"
    EGP = "EGP"
    ERN = "ERN"
    ETB = "ETB"
    EUR = "EUR"
    FJD = "FJD"
    FKP = "FKP"
    GBP = "GBP"
    GEL = "GEL"
    GHS = "GHS"
    GIP = "GIP"
    GMD = "GMD"
    GNF = "GNF"
    GTQ = "GTQ"
    GYD = "GYD"
    HKD = "HKD"
    HNL = "HNL"
    HRK = "HRK"
    HTG = "HTG"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    IQD = "IQD"
    IRR = "IRR"
    ISK = "ISK"
    JMD = "JMD"
    JOD = "JOD"
    JPY = "JPY"
    KES = "KES"
    KGS = "KGS"
    KHR = "KHR"
    KMF = "KMF"
    KPW = "KPW"
    KRW = "KRW"
    KWD = "KWD"
    KYD = "KYD"
    KZT = "KZT"
    LAK = "LAK"
    LBP = "LBP"
    LKR = "LKR"
    LRD = "LRD"
    LSL = "LSL"
    LYD = "LYD"
    MAD = "MAD"
    MDL = "MDL"
    MGA = "MGA"
    MKD = "MKD"
    MMK = "MMK"
    MNT = "MNT"
    MOP = "MOP"
    MRO = "MRO"
    MTL = "MTL"
    MUR = "MUR"
    MVR = "MVR"
    MWK = "MWK"
    MXN = "MXN"
    MYR = "MYR"
    MZN = "MZN"
    NAD = "NAD"
    NGN = "NGN"
    NIO = "NIO"
    NOK = "NOK"
    NPR = "NPR"
    NZD = "NZD"
    OMR = "OMR"
    PAB = "PAB"
    PEN = "PEN"
    PGK = "PGK"
    PHP = "PHP"
    PKR = "PKR"
    PLN = "PLN"
    PYG = "PYG"
    QAR = "QAR"
    RON = "RON"
    RSD = "RSD"
    RUB = "RUB"
    RWF = "RWF"
    SAR = "SAR"
    SBD = "SBD"
    SCR = "SCR"
    SDD = "SDD"
    SDG = "SDG"
    SEK = "SEK"
    SGD = "SGD"
    SHP = "SHP"
    SLL = "SLL"
    SOS = "SOS"
    SRD = "SRD"
    STD = "STD"
    SVC = "SVC"
    SYP = "SYP"
    SZL = "SZL"
    THB = "THB"
    TJS = "TJS"
    TMT = "TMT"
    TND = "TND"
    TOP = "TOP"
    TRY = "TRY"
    TTD = "TTD"
    TVD = "TVD"
    TWD = "TWD"
    TZS = "TZS"
    UAH = "UAH"
    UGX = "UGX"
    USD = "USD"
    UYU = "UYU"
    UZS = "UZS"
    VEB = "VEB"
    VEF = "VEF"
    VND = "VND"
    VUV = "VUV"
    WST = "WST"
    XAF = "XAF"
    XCD = "XCD"
    XBT = "XBT"
    XOF = "XOF"
    XPF = "XPF"
    YER = "YER"
    ZAR = "ZAR"
    ZMW = "ZMW"
    WON = "WON"


class CurrencyFormat(NamedTuple):
    symbol: str
    thousands_separator: str
    decimal_separator: str
    decimal_digits: int


# Formatting defaults applied when a cart picks a currency by code alone.
# Codes missing from this table use the code itself as the symbol.
CURRENCY_FORMATS: dict[CurrencyCode, CurrencyFormat] = {
    CurrencyCode.AED: CurrencyFormat("د.إ.‏", ",", ".", 2),
    CurrencyCode.ARS: CurrencyFormat("$", ".", ",", 2),
    CurrencyCode.AUD: CurrencyFormat("$", ",", ".", 2),
    CurrencyCode.BHD: CurrencyFormat("د.ب.‏", ",", ".", 3),
    CurrencyCode.BRL: CurrencyFormat("R$", ".", ",", 2),
    CurrencyCode.BTC: CurrencyFormat("₿", ",", ".", 8),
    CurrencyCode.CAD: CurrencyFormat("$", ",", ".", 2),
    CurrencyCode.CHF: CurrencyFormat("CHF", "'", ".", 2),
    CurrencyCode.CLP: CurrencyFormat("$", ".", ",", 0),
    CurrencyCode.CNY: CurrencyFormat("¥", ",", ".", 2),
    CurrencyCode.COP: CurrencyFormat("$", ".", ",", 2),
    CurrencyCode.CZK: CurrencyFormat("Kč", " ", ",", 2),
    CurrencyCode.DKK: CurrencyFormat("kr.", ".", ",", 2),
    CurrencyCode.EUR: CurrencyFormat("€", ".", ",", 2),
    CurrencyCode.GBP: CurrencyFormat("£", ",", ".", 2),
    CurrencyCode.HKD: CurrencyFormat("HK$", ",", ".", 2),
    CurrencyCode.HUF: CurrencyFormat("Ft", " ", ",", 2),
    CurrencyCode.IDR: CurrencyFormat("Rp", ".", ",", 0),
    CurrencyCode.ILS: CurrencyFormat("₪", ",", ".", 2),
    CurrencyCode.INR: CurrencyFormat("₹", ",", ".", 2),
    CurrencyCode.ISK: CurrencyFormat("kr", ".", ",", 0),
    CurrencyCode.JOD: CurrencyFormat("د.ا.‏", ",", ".", 3),
    CurrencyCode.JPY: CurrencyFormat("¥", ",", ".", 0),
    CurrencyCode.KRW: CurrencyFormat("₩", ",", ".", 0),
    CurrencyCode.KWD: CurrencyFormat("د.ك.‏", ",", ".", 3),
    CurrencyCode.MXN: CurrencyFormat("$", ",", ".", 2),
    CurrencyCode.MYR: CurrencyFormat("RM", ",", ".", 2),
    CurrencyCode.NOK: CurrencyFormat("kr", " ", ",", 2),
    CurrencyCode.NZD: CurrencyFormat("$", ",", ".", 2),
    CurrencyCode.OMR: CurrencyFormat("ر.ع.‏", ",", ".", 3),
    CurrencyCode.PHP: CurrencyFormat("₱", ",", ".", 2),
    CurrencyCode.PLN: CurrencyFormat("zł", " ", ",", 2),
    CurrencyCode.RUB: CurrencyFormat("₽", " ", ",", 2),
    CurrencyCode.SAR: CurrencyFormat("ر.س.‏", ",", ".", 2),
    CurrencyCode.SEK: CurrencyFormat("kr", " ", ",", 2),
    CurrencyCode.SGD: CurrencyFormat("$", ",", ".", 2),
    CurrencyCode.THB: CurrencyFormat("฿", ",", ".", 2),
    CurrencyCode.TRY: CurrencyFormat("₺", ".", ",", 2),
    CurrencyCode.TWD: CurrencyFormat("NT$", ",", ".", 2),
    CurrencyCode.UAH: CurrencyFormat("₴", " ", ",", 2),
    CurrencyCode.USD: CurrencyFormat("$", ",", ".", 2),
    CurrencyCode.VND: CurrencyFormat("₫", ".", ",", 0),
    CurrencyCode.XAF: CurrencyFormat("FCFA", " ", ",", 0),
    CurrencyCode.XOF: CurrencyFormat("CFA", " ", ",", 0),
    CurrencyCode.ZAR: CurrencyFormat("R", " ", ",", 2),
}


def get_currency_format(code: CurrencyCode) -> CurrencyFormat:
    """Look up formatting defaults for a currency code"""
    return CURRENCY_FORMATS.get(code, CurrencyFormat(code.value, ",", ".", 2))
