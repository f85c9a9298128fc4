"""
Lexicons for search query extraction.

Every table here maps surface forms found in user queries (English,
Modern Standard Arabic, Levantine dialect spellings, missing-hamza and
ta-marbuta variants) to one canonical value. The tables are built once
at import time and exposed read-only; extraction passes never mutate them.

English entries are lowercase because they are matched against the
normalized query. Arabic entries are matched as substrings because
Arabic attaches prefixes (و، ب، ل، ال) directly to words.
"""

from types import MappingProxyType
from typing import NamedTuple

from aqar_query.core.enums import Amenity, City, PropertyType, Status, ViewType

# =============================================================================
# NUMBER WORDS
# =============================================================================

EN_NUMBER_WORDS = MappingProxyType(
    {
        "one": 1,
        "two": 2,
        "three": 3,
        "four": 4,
        "five": 5,
        "six": 6,
        "seven": 7,
        "eight": 8,
        "nine": 9,
        "ten": 10,
    }
)

# Count words as they appear before a counted noun ("ثلاث غرف", "اربعة حمامات").
AR_COUNT_WORDS = MappingProxyType(
    {
        "واحد": 1,
        "واحدة": 1,
        "واحده": 1,
        "اثنين": 2,
        "إثنين": 2,
        "اثنان": 2,
        "تنين": 2,
        "ثلاث": 3,
        "ثلاثة": 3,
        "ثلاثه": 3,
        "تلات": 3,
        "تلاتة": 3,
        "أربع": 4,
        "اربع": 4,
        "أربعة": 4,
        "اربعة": 4,
        "أربعه": 4,
        "اربعه": 4,
        "خمس": 5,
        "خمسة": 5,
        "خمسه": 5,
        "ست": 6,
        "ستة": 6,
        "سته": 6,
        "سبع": 7,
        "سبعة": 7,
        "سبعه": 7,
        "ثمان": 8,
        "ثماني": 8,
        "ثمانية": 8,
        "تمانية": 8,
        "تسع": 9,
        "تسعة": 9,
        "تسعه": 9,
        "عشر": 10,
        "عشرة": 10,
        "عشره": 10,
    }
)

_AR_THOUSAND_WORDS = ("ألف", "الف")
_AR_THOUSANDS_PLURAL = ("آلاف", "الاف")

_AR_TENS = {
    "عشرين": 20,
    "عشرون": 20,
    "ثلاثين": 30,
    "تلاتين": 30,
    "أربعين": 40,
    "اربعين": 40,
    "خمسين": 50,
    "ستين": 60,
    "سبعين": 70,
    "ثمانين": 80,
    "تمانين": 80,
    "تسعين": 90,
}

_AR_HUNDREDS = {
    "مئة": 100,
    "مائة": 100,
    "مية": 100,
    "ميه": 100,
    "مئتين": 200,
    "مائتين": 200,
    "ميتين": 200,
    "ثلاثمئة": 300,
    "ثلاثمائة": 300,
    "تلتمية": 300,
    "أربعمئة": 400,
    "اربعمئة": 400,
    "أربعمائة": 400,
    "اربعمائة": 400,
    "خمسمئة": 500,
    "خمسمائة": 500,
    "خمسمية": 500,
    "ستمئة": 600,
    "ستمائة": 600,
    "سبعمئة": 700,
    "سبعمائة": 700,
    "ثمانمئة": 800,
    "ثمانمائة": 800,
    "تسعمئة": 900,
    "تسعمائة": 900,
}


def _build_amount_phrases() -> dict[str, int]:
    phrases: dict[str, int] = {}
    for word, value in {**_AR_TENS, **_AR_HUNDREDS}.items():
        phrases[word] = value
        for thousand in _AR_THOUSAND_WORDS:
            phrases[f"{word} {thousand}"] = value * 1000
    for word, value in AR_COUNT_WORDS.items():
        if value < 3:
            continue
        for thousands in _AR_THOUSANDS_PLURAL:
            phrases[f"{word} {thousands}"] = value * 1000
        phrases[f"{word} ملايين"] = value * 1_000_000
    for thousand in _AR_THOUSAND_WORDS:
        phrases[thousand] = 1000
    phrases.update(
        {
            "ألفين": 2000,
            "الفين": 2000,
            "مليون": 1_000_000,
            "مليونين": 2_000_000,
            "مليون ونص": 1_500_000,
            "مليون ونصف": 1_500_000,
            "نص مليون": 500_000,
            "نصف مليون": 500_000,
            "ربع مليون": 250_000,
        }
    )
    return phrases


# Spelled-out Arabic amounts ("خمسين ألف" -> 50000, "مئة ألف" -> 100000).
AR_AMOUNT_PHRASES = MappingProxyType(_build_amount_phrases())

# Multipliers written after a digit amount ("50k", "50 الف", "1.5 مليون").
AMOUNT_SCALE_WORDS = MappingProxyType(
    {
        "k": 1000,
        "thousand": 1000,
        "ألف": 1000,
        "الف": 1000,
        "آلاف": 1000,
        "الاف": 1000,
        "million": 1_000_000,
        "mn": 1_000_000,
        "مليون": 1_000_000,
        "ملايين": 1_000_000,
    }
)

# =============================================================================
# CURRENCY / PRICE / AREA TOKENS (regex fragments, normalized text)
# =============================================================================

CURRENCY_PATTERNS = (
    r"us\s*dollars?",
    r"usd",
    r"\$",
    r"dollars?",
    r"syp",
    r"s\.p\.?",
    r"liras?",
    r"دولار(?:ات)?(?:\s*(?:أميركي|اميركي|أمريكي|امريكي))?",
    r"ليرة(?:\s*سورية)?",
    r"ليرات",
    r"ل\.س",
)

PRICE_MARKER_PATTERNS = (
    r"price",
    r"budget",
    r"cost",
    r"بسعر",
    r"السعر",
    r"سعر",
    r"ميزانيتي",
    r"ميزانية",
    r"بميزانية",
)

AREA_UNIT_PATTERNS = (
    r"square\s*met(?:er|re)s?",
    r"square\s*f(?:ee|oo)t",
    r"sq\.?\s*ft",
    r"sq\.?\s*m",
    r"sqft",
    r"sqm",
    r"m2",
    r"m²",
    r"met(?:er|re)s?",
    r"متر\s*مربع",
    r"مترمربع",
    r"امتار",
    r"أمتار",
    r"متر",
    r"م2",
    r"م²",
)

AREA_MARKER_PATTERNS = (
    r"size",
    r"area",
    r"بمساحة",
    r"مساحة",
    r"مساحه",
)

# Nouns that can directly follow a number which is therefore not an amount.
COUNTED_NOUN_PATTERNS = (
    r"bedrooms?",
    r"beds?",
    r"br\b",
    r"rooms?",
    r"bathrooms?",
    r"baths?",
    r"floors?",
    r"غرف",
    r"حمام",
    r"طابق",
    r"طوابق",
    r"years?(?![a-z])",
    r"months?(?![a-z])",
    r"minutes?(?![a-z])",
    r"سنة",
    r"سنين",
    r"سنوات",
    r"شهر(?![\u0600-\u06FF])",
    r"أشهر",
    r"اشهر",
    r"دقيقة",
    r"دقائق",
)

# =============================================================================
# STATUS KEYWORDS
# =============================================================================

STATUS_KEYWORDS_EN = MappingProxyType(
    {
        Status.RENT: ("for rent", "to rent", "rent", "rental", "renting", "lease", "leasing"),
        Status.SALE: ("for sale", "sale", "sell", "selling", "buy", "buying", "purchase"),
    }
)

# شراء ("to buy") is a Sale query, not a purchase request.
STATUS_KEYWORDS_AR = MappingProxyType(
    {
        Status.RENT: ("للإيجار", "للايجار", "إيجار", "ايجار", "أجار", "اجار", "استئجار"),
        Status.SALE: ("للبيع", "بيع", "للشراء", "شراء", "تمليك"),
    }
)

# =============================================================================
# PROPERTY TYPE KEYWORDS
# =============================================================================

PROPERTY_TYPE_NAMES_EN = MappingProxyType(
    {
        PropertyType.APARTMENT: ("apartments", "apartment"),
        PropertyType.VILLA: ("villas", "villa"),
        PropertyType.OFFICE: ("offices", "office"),
        PropertyType.LAND: ("lands", "land"),
        PropertyType.COMMERCIAL: ("commercial",),
        PropertyType.HOLIDAY_HOME: ("holiday homes", "holiday home"),
    }
)

# Order matters: holiday synonyms are checked before the generic house/home words.
PROPERTY_TYPE_SYNONYMS_EN = (
    (PropertyType.APARTMENT, ("apt", "flat", "flats", "unit", "units", "studio", "penthouse", "duplex")),
    (PropertyType.HOLIDAY_HOME, ("chalet", "chalets", "vacation home", "summer house", "holiday house")),
    (PropertyType.VILLA, ("house", "houses", "home", "homes", "townhouse", "mansion")),
    (PropertyType.COMMERCIAL, ("shop", "shops", "store", "stores", "showroom", "warehouse", "retail")),
    (PropertyType.LAND, ("plot", "plots", "acre", "acres", "farm")),
)

PROPERTY_TYPE_KEYWORDS_AR = (
    (PropertyType.APARTMENT, ("شقة", "شقه", "شقق", "ستوديو")),
    (PropertyType.VILLA, ("فيلا", "فيلات", "فيلة", "فلة", "بيت مستقل")),
    (PropertyType.OFFICE, ("مكتب", "مكاتب")),
    (PropertyType.LAND, ("قطعة أرض", "قطعة ارض", "أراضي", "اراضي", "أرض", "ارض")),
    (PropertyType.COMMERCIAL, ("تجاري", "محلات", "محل", "مستودع")),
    (PropertyType.HOLIDAY_HOME, ("شاليهات", "شاليه", "بيت عطلة", "استراحة")),
)

# Keywords of these types must end the word: "ارض" is also the stem of "ارضي" (ground floor).
PROPERTY_TYPES_AR_WHOLE_WORD = frozenset({PropertyType.LAND})

# =============================================================================
# ROOM TOKENS
# =============================================================================

SALON_TOKENS = ("صالون", "صالة", "صاله")
UTILITY_TOKENS = ("منتفعات", "منافع", "منفعة")

# A bathroom token inside one of these phrases is not a bathroom count.
BATHROOM_BLOCKING_WORDS = ("حمام سباحة", "حمام السباحة", "حمامات سباحة")

# =============================================================================
# CITY ALIASES
# =============================================================================


class CityAliases(NamedTuple):
    en: tuple[str, ...]
    ar: tuple[str, ...]


CITY_ALIASES = MappingProxyType(
    {
        City.ALEPPO: CityAliases(
            en=("aleppo", "halab"),
            ar=("حلب", "حلبي", "حلبية", "حلبا"),
        ),
        City.AS_SUWAYDA: CityAliases(
            en=("as-suwayda", "al-suwayda", "suwayda", "sweida", "swaida"),
            ar=("السويداء", "السويدا", "سويداء", "سويدا"),
        ),
        City.DAMASCUS: CityAliases(
            en=("damascus", "dimashq", "sham"),
            ar=("دمشق", "دمشئ", "دمشقي", "الشام", "شام"),
        ),
        City.DARAA: CityAliases(
            en=("daraa", "dara'a", "deraa"),
            ar=("درعا", "درعاوي"),
        ),
        City.DEIR_EZ_ZUR: CityAliases(
            en=("deir ez-zur", "deir ez-zor", "deir ezzor", "deir el-zor", "deir al-zour", "deir"),
            ar=("دير الزور", "ديرالزور", "الدير", "ديري"),
        ),
        City.HAMA: CityAliases(
            en=("hama", "hamah"),
            ar=("حماة", "حماه", "حما"),
        ),
        City.HOMS: CityAliases(
            en=("homs", "hims"),
            ar=("حمص", "حمصي"),
        ),
        City.IDLIB: CityAliases(
            en=("idlib", "idleb"),
            ar=("إدلب", "ادلب", "ادليب", "إدلبي"),
        ),
        City.LATAKIA: CityAliases(
            en=("latakia", "lattakia", "latakiya", "lattaquie"),
            ar=("اللاذقية", "اللاذقيه", "اللادئية", "اللادقية", "لاذقية", "لادقية", "لادئية", "لاذقاني"),
        ),
        City.RAQQAH: CityAliases(
            en=("raqqah", "raqqa", "rakka"),
            ar=("الرقة", "الرقه", "رقة", "رقي"),
        ),
        City.TARTUS: CityAliases(
            en=("tartus", "tartous"),
            ar=("طرطوس", "طرطوسي"),
        ),
    }
)

DAMASCUS_COLLOQUIAL_ALIASES = ("الشام", "شام")

# A city alias embedded inside one of these words is not a city mention
# ("حما" inside "حمامين", "رقي" inside "شرقي").
CITY_BLOCKING_WORDS = (
    "حمام",
    "حمامين",
    "حمامان",
    "حمامات",
    "منتفعات",
    "منافع",
    "حماية",
    "شرقي",
    "شرقية",
    "ورقة",
)

DAMASCUS_COLLOQUIAL_BLOCKING_WORDS = ("هشام", "شامل", "شاملة")

# =============================================================================
# NEIGHBORHOOD ALIASES
# =============================================================================

NEIGHBORHOOD_ALIASES = MappingProxyType(
    {
        # Arabic
        "العزيزية": "Al-Aziziyah",
        "العزيزيه": "Al-Aziziyah",
        "الجميلية": "Al-Jamiliyah",
        "الجميليه": "Al-Jamiliyah",
        "الصالحية": "Al-Salihiyah",
        "الصالحيه": "Al-Salihiyah",
        "الميدان": "Al-Midan",
        "الشهباء": "Al-Shahba",
        "المزة": "Al-Mazzeh",
        "المزه": "Al-Mazzeh",
        "أبو رمانة": "Abu Rummaneh",
        "ابو رمانة": "Abu Rummaneh",
        "ابو رمانه": "Abu Rummaneh",
        "المالكي": "Al-Malki",
        "كفرسوسة": "Kafr Sousa",
        "كفر سوسة": "Kafr Sousa",
        "باب توما": "Bab Touma",
        "المهاجرين": "Al-Muhajirin",
        "جرمانا": "Jaramana",
        "الفرقان": "Al-Furqan",
        "الحمدانية": "Al-Hamdaniyah",
        "الموكامبو": "Al-Mokambo",
        "الوعر": "Al-Waer",
        "الإنشاءات": "Al-Inshaat",
        "الانشاءات": "Al-Inshaat",
        "الزراعة": "Al-Ziraa",
        # English (lowercase)
        "al-aziziyah": "Al-Aziziyah",
        "aziziyah": "Al-Aziziyah",
        "aziziyeh": "Al-Aziziyah",
        "al-jamiliyah": "Al-Jamiliyah",
        "jamiliyah": "Al-Jamiliyah",
        "salihiyah": "Al-Salihiyah",
        "midan": "Al-Midan",
        "shahba": "Al-Shahba",
        "al mazzeh": "Al-Mazzeh",
        "mazzeh": "Al-Mazzeh",
        "mezzeh": "Al-Mazzeh",
        "abu rummaneh": "Abu Rummaneh",
        "abu rumaneh": "Abu Rummaneh",
        "malki": "Al-Malki",
        "kafr sousa": "Kafr Sousa",
        "kafrsouseh": "Kafr Sousa",
        "bab touma": "Bab Touma",
        "muhajirin": "Al-Muhajirin",
        "jaramana": "Jaramana",
        "furqan": "Al-Furqan",
        "hamdaniyah": "Al-Hamdaniyah",
        "waer": "Al-Waer",
    }
)

# Words that follow "in"/"near" without naming a place.
NEIGHBORHOOD_STOPWORDS = frozenset(
    {
        "the",
        "a",
        "an",
        "my",
        "any",
        "good",
        "great",
        "excellent",
        "nice",
        "new",
        "old",
        "syria",
        "city",
        "town",
        "center",
        "centre",
        "downtown",
        "total",
        "usd",
        "dollars",
        "least",
        "most",
        "around",
        "about",
        "under",
        "over",
        "between",
        "from",
        "less",
        "more",
        "sale",
        "rent",
    }
)

# =============================================================================
# AMENITIES / FURNISHING / GARAGE
# =============================================================================

AMENITY_KEYWORDS_EN = MappingProxyType(
    {
        "parking": Amenity.PARKING,
        "garage": Amenity.PARKING,
        "elevator": Amenity.LIFT,
        "lift": Amenity.LIFT,
        "air conditioning": Amenity.AIR_CONDITIONING,
        "air condition": Amenity.AIR_CONDITIONING,
        "a/c": Amenity.AIR_CONDITIONING,
        "ac": Amenity.AIR_CONDITIONING,
        "gym": Amenity.GYM,
        "fitness": Amenity.GYM,
        "pool": Amenity.SWIMMING_POOL,
        "swimming": Amenity.SWIMMING_POOL,
        "security": Amenity.SECURITY_CAMERAS,
        "camera": Amenity.SECURITY_CAMERAS,
        "cameras": Amenity.SECURITY_CAMERAS,
        "balcony": Amenity.BALCONY,
        "balconies": Amenity.BALCONY,
        "internet": Amenity.BASIC_INTERNET,
        "wifi": Amenity.BASIC_INTERNET,
        "fiber": Amenity.FIBER_INTERNET,
        "fibre": Amenity.FIBER_INTERNET,
        "starlink": Amenity.STARLINK_INTERNET,
        "star link": Amenity.STARLINK_INTERNET,
        "solar": Amenity.SOLAR_ENERGY,
        "reception": Amenity.RECEPTION,
        "concierge": Amenity.RECEPTION,
        "doorman": Amenity.RECEPTION,
        "nator": Amenity.RECEPTION,
        "fire alarm": Amenity.FIRE_ALARMS,
        "fire alarms": Amenity.FIRE_ALARMS,
    }
)

AMENITY_KEYWORDS_AR = MappingProxyType(
    {
        "موقف سيارات": Amenity.PARKING,
        "موقف": Amenity.PARKING,
        "مواقف": Amenity.PARKING,
        "باركينغ": Amenity.PARKING,
        "كراج": Amenity.PARKING,
        "مصعد": Amenity.LIFT,
        "اسانسير": Amenity.LIFT,
        "تكييف": Amenity.AIR_CONDITIONING,
        "مكيف": Amenity.AIR_CONDITIONING,
        "نادي رياضي": Amenity.GYM,
        "جيم": Amenity.GYM,
        "مسبح": Amenity.SWIMMING_POOL,
        "حمام سباحة": Amenity.SWIMMING_POOL,
        "حمام السباحة": Amenity.SWIMMING_POOL,
        "كاميرات مراقبة": Amenity.SECURITY_CAMERAS,
        "كاميرات": Amenity.SECURITY_CAMERAS,
        "بلكون": Amenity.BALCONY,
        "بلكونة": Amenity.BALCONY,
        "شرفة": Amenity.BALCONY,
        "برندة": Amenity.BALCONY,
        "انترنت": Amenity.BASIC_INTERNET,
        "إنترنت": Amenity.BASIC_INTERNET,
        "واي فاي": Amenity.BASIC_INTERNET,
        "فايبر": Amenity.FIBER_INTERNET,
        "ألياف ضوئية": Amenity.FIBER_INTERNET,
        "الياف ضوئية": Amenity.FIBER_INTERNET,
        "ستارلينك": Amenity.STARLINK_INTERNET,
        "ستار لينك": Amenity.STARLINK_INTERNET,
        "طاقة شمسية": Amenity.SOLAR_ENERGY,
        "ألواح شمسية": Amenity.SOLAR_ENERGY,
        "الواح شمسية": Amenity.SOLAR_ENERGY,
        "ناطور": Amenity.RECEPTION,
        "استقبال": Amenity.RECEPTION,
        "إنذار حريق": Amenity.FIRE_ALARMS,
        "انذار حريق": Amenity.FIRE_ALARMS,
    }
)

UNFURNISHED_KEYWORDS_EN = ("unfurnished", "not furnished", "without furniture")
UNFURNISHED_KEYWORDS_AR = ("غير مفروش", "غير مفروشة", "بدون فرش", "بدون عفش", "مو مفروش", "مش مفروش")
FURNISHED_KEYWORDS_EN = ("furnished", "with furniture")
FURNISHED_KEYWORDS_AR = ("مفروش", "مفروشة", "مع فرش", "مع عفش")

GARAGE_KEYWORDS_EN = ("garage", "garages")
GARAGE_KEYWORDS_AR = ("كراج", "كراجات", "جراج", "مرآب", "مراب")

# =============================================================================
# VIEW TYPES AND FREE KEYWORDS
# =============================================================================


class ViewKeywords(NamedTuple):
    view_type: ViewType
    en: str
    ar: tuple[str, ...]
    tags: tuple[str, ...]


# Highest priority first: sea > mountain > open > generic.
VIEW_KEYWORDS = (
    ViewKeywords(
        ViewType.SEA,
        r"\b(?:sea|ocean|water)\s*views?\b",
        ("إطلالة بحرية", "اطلالة بحرية", "إطلالة على البحر", "اطلالة على البحر", "منظر بحري", "منظر البحر", "فيو بحر"),
        ("sea view",),
    ),
    ViewKeywords(
        ViewType.MOUNTAIN,
        r"\b(?:mountain|hill)\s*views?\b",
        ("إطلالة جبلية", "اطلالة جبلية", "إطلالة على الجبل", "اطلالة على الجبل", "منظر جبلي", "فيو جبل"),
        ("mountain view",),
    ),
    ViewKeywords(
        ViewType.OPEN,
        r"\b(?:open|wide|panoramic)\s*views?\b",
        ("إطلالة مفتوحة", "اطلالة مفتوحة", "منظر مفتوح", "فيو مفتوح"),
        ("open view",),
    ),
    ViewKeywords(
        ViewType.GENERIC,
        r"\b(?:nice|beautiful|good|great|amazing|lovely)\s*views?\b",
        ("إطلالة", "اطلالة", "منظر حلو", "منظر جميل", "فيو"),
        ("nice view", "view"),
    ),
)

KEYWORD_ADJECTIVES_EN = (
    "nice",
    "beautiful",
    "good",
    "great",
    "amazing",
    "spacious",
    "modern",
    "luxury",
    "luxurious",
    "new",
    "old",
)

# (phrases that trigger the tags, tags appended in order)
KEYWORD_TAGS_AR = (
    (("طابو اخضر", "طابو أخضر"), ("green title deed", "طابو اخضر")),
    (("بناء جديد",), ("new building", "بناء جديد")),
    (SALON_TOKENS, ("salon", "living room", "صالون")),
    (UTILITY_TOKENS, ("bathrooms", "حمامات", "منتفعات")),
    (("مطبخ", "مطابخ"), ("kitchen", "مطبخ")),
    (("جديد", "حديث"), ("new", "جديد")),
    (("جميل", "حلو"), ("nice", "beautiful", "جميل")),
    (("فاخر", "راقي"), ("luxury", "فاخر")),
)
