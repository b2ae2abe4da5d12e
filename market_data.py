"""
Static Uzbekistan market tables used by the apartment scorer.

Every lookup is an ordered tuple of (keywords, value) rules. Rules are
checked top to bottom against the lower-cased input and the first rule with
a matching keyword wins, so specific names must stay above generic ones
("toshkent shahri" before "viloyat").
"""

# ==================== PRICE BASELINES (USD per m2) ====================

RENT_RATE_RULES = (
    (("toshkent shahri",), 8.3),
    (("samarqand", "buxoro"), 5.5),
    (("namangan", "andijon", "nukus", "qo'qon", "qarshi", "termiz"), 3.8),
    (("marg'ilon", "urganch", "navoiy", "jizzax", "guliston", "chirchiq",
      "angren", "bekobod"), 2.8),
    (("toshkent viloyati",), 4.2),
    (("viloyati", "viloyat"), 2.5),
    (("qoraqalpog", "karakalpak"), 1.8),
)
DEFAULT_RENT_RATE = 3.2

SALE_RATE_RULES = (
    (("toshkent shahri",), 1128),
    (("samarqand", "buxoro"), 750),
    (("namangan", "andijon", "nukus", "qo'qon", "qarshi", "termiz"), 550),
    (("marg'ilon", "urganch", "navoiy", "jizzax", "guliston", "chirchiq",
      "angren", "bekobod"), 420),
    (("toshkent viloyati",), 650),
    (("viloyati", "viloyat"), 380),
    (("qoraqalpog", "karakalpak"), 333),
)
DEFAULT_SALE_RATE = 450

# ==================== LOCATION ====================

CITY_TIER_RULES = (
    (("toshkent shahri",), 9.8),
    (("toshkent viloyati",), 7.5),
    (("samarqand", "buxoro"), 8.5),
    (("namangan", "andijon", "nukus", "qo'qon", "qarshi", "termiz"), 7.2),
    (("marg'ilon", "urganch", "navoiy", "jizzax", "guliston", "chirchiq",
      "angren", "bekobod"), 6.4),
    (("viloyati", "viloyat"), 6.0),
    (("qoraqalpog", "karakalpak"), 4.8),
    (("denov", "kattaqo'rg'on"), 5.5),
)
DEFAULT_CITY_TIER = 5.0

# (city keywords, district rules); only the first matching city is adjusted
DISTRICT_RULES = (
    (("toshkent shahri",), (
        (("mirobod", "shayxontohur", "yakkasaroy", "chilonzor", "yunusobod",
          "mirzo ulug'bek"), 1.5),
        (("olmazor", "sirg'ali", "uchtepa", "yangihayot"), 0.5),
        (("sergeli", "bektemir", "yangiyo'l", "quyichirchiq", "piskent",
          "zangiota"), -1.2),
    )),
    (("samarqand",), (
        (("registon", "siyob"), 0.8),
    )),
    (("buxoro",), (
        (("poi kalon", "lyabi hauz"), 0.8),
    )),
    (("andijon",), (
        (("markaz", "center"), 0.6),
    )),
    (("namangan",), (
        (("markaz", "center"), 0.6),
    )),
)

# ==================== MARKET DYNAMICS ====================

# "jizzax viloyati" sits below "jizzax" and never fires; kept in its place
GROWTH_RULES = (
    (("xorazm", "khorezm"), 0.8),
    (("surxondaryo", "surkhandarya"), 0.7),
    (("buxoro", "bukhara"), 0.6),
    (("qashqadaryo", "kashkadarya"), 0.5),
    (("toshkent shahri",), 0.3),
    (("toshkent viloyati",), 0.2),
    (("samarqand", "samarkand"), 0.4),
    (("namangan", "andijon"), 0.3),
    (("navoiy", "jizzax", "guliston", "qarshi"), 0.1),
    (("jizzax viloyati",), -0.3),
    (("sirdaryo viloyati",), -0.4),
    (("qoraqalpog", "karakalpak"), 0.0),
)
DEFAULT_GROWTH = 0.1

# value is (rent, sale)
VOLATILITY_RULES = (
    (("toshkent shahri",), (0.3, 0.2)),
    (("xorazm", "surxondaryo", "buxoro", "qashqadaryo"), (0.1, 0.0)),
    (("samarqand", "namangan", "andijon", "toshkent viloyati"), (0.0, -0.1)),
    (("navoiy", "jizzax", "guliston", "qarshi"), (-0.1, -0.2)),
    (("sirdaryo viloyati", "jizzax viloyati"), (-0.2, -0.3)),
    (("qoraqalpog", "karakalpak"), (-0.1, -0.1)),
)
DEFAULT_VOLATILITY = (0.0, 0.0)

# ==================== AMENITIES ====================

AMENITY_BASE = 5.0

# every matching group counts, unlike the first-match tables above
POSITIVE_AMENITIES = (
    (("zamonaviy", "modern", "renovated", "ta'mirlangan"), 1.2),
    (("konditsioner", "air conditioning", "ac"), 1.0),
    (("internet", "wi-fi", "wifi"), 0.8),
    (("balkon", "balcony", "terrace", "terrasa"), 0.8),
    (("parking", "garage", "mashina joyi"), 0.8),
    (("lift", "elevator"), 0.6),
    (("security", "xavfsizlik", "guard"), 0.6),
    (("gym", "fitness", "sport"), 0.8),
    (("pool", "basseyn", "rooftop"), 1.0),
    (("dishwasher", "posuda yuvish mashinasi"), 0.5),
    (("washing machine", "kir yuvish mashinasi"), 0.5),
    (("furnished", "mebellar bilan"), 0.7),
    (("metro", "metroga yaqin"), 0.6),
    (("school", "maktab", "university", "universitet"), 0.4),
    (("hospital", "shifoxona", "clinic"), 0.4),
    (("market", "bozor", "supermarket"), 0.3),
)

NEGATIVE_AMENITIES = (
    (("needs work", "fixer", "ta'mirga muhtoj"), -1.2),
    (("noisy", "loud", "shovqinli"), -0.8),
    (("small", "cramped", "kichik"), -0.6),
    (("old", "eski", "qadimiy"), -0.4),
    (("dirty", "kir", "iflos"), -0.8),
    (("broken", "buzilgan", "ishlamaydi"), -0.6),
)

# ==================== BUILDING ====================

BUILDING_BASE = 5.0

BUILDING_TYPE_POINTS = {
    "penthouse": 3.0,
    "house": 2.2,
    "apartment": 1.2,
    "studio": 0.3,
}

CONDITION_POINTS = {
    "new": 2.5,
    "renovated": 2.0,
    "good": 0.8,
    "needs_renovation": -2.0,
}

# (max age in years, points)
AGE_BANDS = (
    (3, 2.0),
    (7, 1.5),
    (15, 1.0),
    (25, 0.5),
    (40, 0.0),
    (60, -0.8),
)
OLDEST_AGE_POINTS = -1.8

# (highest floor in band, points)
FLOOR_BANDS = (
    (1, -1.0),
    (2, 1.2),
    (5, 1.5),
    (8, 1.0),
    (12, 0.3),
)
TOP_FLOOR_POINTS = -0.5

BUILDING_HEIGHT_BANDS = (
    (3, 0.0),
    (6, 0.8),
    (9, 0.5),
    (15, 0.0),
)
TALLEST_BUILDING_POINTS = -0.5

# (earliest year built, points); the 2010 band also needs MODERN_MIN_FLOORS
ERA_BANDS = (
    (2010, 0.3),
    (1990, 0.1),
    (1970, -0.2),
)
MODERN_MIN_FLOORS = 5

# ==================== PRICE & SIZE BANDS ====================

# (upper price ratio, score delta) for the simple variant
PRICE_BAND_DELTAS = (
    (0.65, 3.5),
    (0.8, 2.8),
    (0.9, 2.0),
    (1.0, 1.2),
    (1.1, 0.2),
    (1.25, -1.0),
    (1.5, -2.5),
    (2.0, -4.0),
)
EXTREME_PRICE_DELTA = -5.5

# (upper price ratio, absolute price score) for the extended variant
PRICE_BAND_SCORES = (
    (0.65, 9.5),
    (0.8, 8.5),
    (0.9, 7.5),
    (1.0, 6.5),
    (1.1, 5.5),
    (1.25, 4.0),
    (1.5, 3.0),
    (2.0, 2.0),
)
EXTREME_PRICE_SCORE = 1.0

# listings at or above this ratio can never score above the ceiling
EXTREME_PRICE_RATIO = 2.0
EXTREME_PRICE_CEILING = 3.5

# (minimum m2 per room, score)
SIZE_BANDS = (
    (25, 9),
    (20, 8),
    (15, 7),
    (12, 6),
    (10, 5),
    (8, 4),
)
CRAMPED_SIZE_SCORE = 3

# ==================== WEIGHTS & LABELS ====================

NEUTRAL_SCORE = 5.0
JITTER = 0.3

SIMPLE_WEIGHTS = {
    "location": 0.65,
    "building_quality": 0.35,
    "size_efficiency": 0.25,
    "amenities": 0.1,
}

EXTENDED_WEIGHTS = {
    "price_comparison": 0.45,
    "location": 0.30,
    "building_quality": 0.15,
    "size_efficiency": 0.08,
    "amenities": 0.02,
}

LABEL_THRESHOLDS = (
    (6.5, "Underpriced"),
    (4.0, "Fair"),
)
LOWEST_LABEL = "Overpriced"


def first_match(text: str, rules, default=None):
    """Return the value of the first rule whose keyword occurs in text."""
    text = (text or "").lower()
    for keywords, value in rules:
        if any(keyword in text for keyword in keywords):
            return value
    return default
