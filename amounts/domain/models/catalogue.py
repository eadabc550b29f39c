from .currency import Currency

# Seed catalogue for the currencies table, grouped by precision and region.
CURRENCY_CATALOGUE: tuple[Currency, ...] = (
    # Zero-decimal currencies
    Currency("JPY", "Japanese Yen", "¥", 0),
    Currency("KRW", "South Korean Won", "₩", 0),
    Currency("VND", "Vietnamese Dong", "₫", 0),
    Currency("CLP", "Chilean Peso", "$", 0),
    Currency("PYG", "Paraguayan Guarani", "₲", 0),
    Currency("UGX", "Ugandan Shilling", "USh", 0),
    Currency("RWF", "Rwandan Franc", "FRw", 0),
    Currency("GNF", "Guinean Franc", "FG", 0),
    Currency("XOF", "West African CFA Franc", "CFA", 0),
    Currency("XAF", "Central African CFA Franc", "FCFA", 0),
    Currency("KMF", "Comorian Franc", "CF", 0),
    Currency("DJF", "Djiboutian Franc", "Fdj", 0),
    Currency("ISK", "Icelandic Króna", "kr", 0),
    Currency("HUF", "Hungarian Forint", "Ft", 0),
    Currency("TWD", "New Taiwan Dollar", "NT$", 0),

    # Three-decimal currencies
    Currency("BHD", "Bahraini Dinar", ".د.ب", 3),
    Currency("JOD", "Jordanian Dinar", "JD", 3),
    Currency("KWD", "Kuwaiti Dinar", "KD", 3),
    Currency("OMR", "Omani Rial", "ر.ع.", 3),
    Currency("TND", "Tunisian Dinar", "DT", 3),
    Currency("IQD", "Iraqi Dinar", "ع.د", 3),
    Currency("LYD", "Libyan Dinar", "LD", 3),

    # Two-decimal currencies (common)
    Currency("USD", "US Dollar", "$", 2),
    Currency("EUR", "Euro", "€", 2),
    Currency("GBP", "British Pound", "£", 2),
    Currency("CAD", "Canadian Dollar", "C$", 2),
    Currency("AUD", "Australian Dollar", "A$", 2),
    Currency("NZD", "New Zealand Dollar", "NZ$", 2),
    Currency("CHF", "Swiss Franc", "CHF", 2),
    Currency("SGD", "Singapore Dollar", "S$", 2),
    Currency("HKD", "Hong Kong Dollar", "HK$", 2),
    Currency("CNY", "Chinese Yuan", "¥", 2),
    Currency("INR", "Indian Rupee", "₹", 2),
    Currency("MXN", "Mexican Peso", "$", 2),
    Currency("BRL", "Brazilian Real", "R$", 2),
    Currency("ARS", "Argentine Peso", "$", 2),
    Currency("COP", "Colombian Peso", "$", 2),
    Currency("PEN", "Peruvian Sol", "S/", 2),

    # African currencies (two-decimal)
    Currency("KES", "Kenyan Shilling", "KSh", 2),
    Currency("TZS", "Tanzanian Shilling", "TSh", 2),
    Currency("NGN", "Nigerian Naira", "₦", 2),
    Currency("ZAR", "South African Rand", "R", 2),
    Currency("GHS", "Ghanaian Cedi", "GH₵", 2),
    Currency("EGP", "Egyptian Pound", "E£", 2),
    Currency("MAD", "Moroccan Dirham", "DH", 2),
    Currency("ETB", "Ethiopian Birr", "Br", 2),
    Currency("ZMW", "Zambian Kwacha", "ZK", 2),
    Currency("BWP", "Botswana Pula", "P", 2),
    Currency("MUR", "Mauritian Rupee", "₨", 2),
    Currency("SCR", "Seychellois Rupee", "₨", 2),

    # Middle East currencies (two-decimal)
    Currency("AED", "UAE Dirham", "د.إ", 2),
    Currency("SAR", "Saudi Riyal", "﷼", 2),
    Currency("QAR", "Qatari Riyal", "QR", 2),
    Currency("ILS", "Israeli Shekel", "₪", 2),
    Currency("TRY", "Turkish Lira", "₺", 2),

    # Asian currencies (two-decimal)
    Currency("PHP", "Philippine Peso", "₱", 2),
    Currency("THB", "Thai Baht", "฿", 2),
    Currency("MYR", "Malaysian Ringgit", "RM", 2),
    Currency("IDR", "Indonesian Rupiah", "Rp", 2),
    Currency("PKR", "Pakistani Rupee", "₨", 2),
    Currency("BDT", "Bangladeshi Taka", "৳", 2),
    Currency("LKR", "Sri Lankan Rupee", "Rs", 2),
    Currency("NPR", "Nepalese Rupee", "₨", 2),
    Currency("MMK", "Myanmar Kyat", "K", 2),

    # European currencies (two-decimal)
    Currency("SEK", "Swedish Krona", "kr", 2),
    Currency("NOK", "Norwegian Krone", "kr", 2),
    Currency("DKK", "Danish Krone", "kr", 2),
    Currency("PLN", "Polish Złoty", "zł", 2),
    Currency("CZK", "Czech Koruna", "Kč", 2),
    Currency("RON", "Romanian Leu", "lei", 2),
    Currency("BGN", "Bulgarian Lev", "лв", 2),
    Currency("HRK", "Croatian Kuna", "kn", 2),
    Currency("RSD", "Serbian Dinar", "din", 2),
    Currency("UAH", "Ukrainian Hryvnia", "₴", 2),
    Currency("RUB", "Russian Ruble", "₽", 2),

    # Other currencies (two-decimal)
    Currency("JMD", "Jamaican Dollar", "J$", 2),
    Currency("TTD", "Trinidad and Tobago Dollar", "TT$", 2),
    Currency("BBD", "Barbadian Dollar", "Bds$", 2),
    Currency("FJD", "Fijian Dollar", "FJ$", 2),
)
