"""
Uzbek explanation texts for apartment analyses.

- explain(): one of three label templates (simple analysis)
- *_reason(): one sentence per factor (extended analysis)
"""

import random
from typing import Optional

PROPERTY_TYPE_TEXT = {"rent": "ijara", "sale": "sotib olish"}
PRICE_TEXT = {"rent": "ijara haqi", "sale": "narx"}
BUILDING_TYPE_TEXT = {
    "apartment": "kvartira",
    "house": "uy",
    "studio": "studiya",
    "penthouse": "pentxaus",
}
CONDITION_TEXT = {
    "new": "yangi",
    "renovated": "ta'mirlangan",
    "good": "yaxshi",
    "needs_renovation": "ta'mirga muhtoj",
}

TEMPLATES = {
    "Underpriced": [
        "Bu {property_type} mulki {city} shahrida bozor narxidan {below} narxda ajoyib "
        "qiymat taklif etadi. {size}m² maydon va {rooms} xonali {building_type} O'zbekiston "
        "ko'chmas mulk bozorida aqlli investitsiya imkoniyatini ifodalaydi. {condition} holat "
        "va {district} tumanidagi joylashuv uning qiymatini oshiradi.",

        "{city} shahrida yashirin durdona topdingiz! {price_word} odatdagi bozor narxlaridan "
        "ancha past, bu hozirgi O'zbekiston bozorida maydon va joylashuv uchun ajoyib bitim. "
        "{building_type} turi va {condition} holat uning raqobatbardoshligini ta'minlaydi.",

        "Bu kamdan-kam uchraydigan imkoniyat - {price_word} {city} shahridagi shunga o'xshash "
        "mulklarga nisbatan {below_degree} past. O'zbekiston ko'chmas mulki uchun qiymat "
        "taklifi ajoyib. {district} tumanidagi joylashuv va {condition} holat uning "
        "investitsiya qiymatini oshiradi.",
    ],
    "Fair": [
        "{price_word} {city} shahri uchun bozor kutishlariga mos keladi. {size}m² maydon va "
        "{rooms} xonali {building_type} bilan siz O'zbekistonning hozirgi bozorida hudud uchun "
        "adolatli qiymat olasiz. {condition} holat va {district} tumanidagi joylashuv uning "
        "bozor qiymatini belgilaydi.",

        "Bu {property_type} mulki {city} uchun o'rtacha qiymat taklif etadi. Narx O'zbekistonda "
        "hozirgi bozor sharoitlarini aks ettiradi, hech qanday sezilarli ustama yoki chegirma "
        "yo'q. {building_type} turi va {condition} holat uning bozor qiymatini to'g'ri aks "
        "ettiradi.",

        "{price_word} {city} shahridagi shunga o'xshash mulklar bilan mos keladi. Siz O'zbekiston "
        "bozorida {size}m² maydon va {rooms} xonali {building_type} uchun bozor narxini "
        "to'layapsiz. {district} tumanidagi joylashuv va {condition} holat uning qiymatini "
        "belgilaydi.",
    ],
    "Overpriced": [
        "{price_word} {city} shahri uchun bozor narxidan {above} ko'rinadi. O'zbekistonda "
        "muzokara qilish yoki boshqa joyda yaxshiroq qiymat qidirishni ko'rib chiqing. "
        "{condition} holat va {district} tumanidagi joylashuv ustamani oqlay olmasligi mumkin.",

        "Bu {property_type} mulki hudud uchun odatdagi bozor narxlaridan yuqori narxlangan. "
        "{size}m² maydon va {rooms} xonali {building_type} hozirgi O'zbekiston bozorida "
        "ustamani oqlay olmasligi mumkin. {condition} holat va {building_type} turi uning "
        "qiymatini oshirsa ham, narx haddan tashqari ko'rinadi.",

        "{city} shahridagi joylashuv istisno bo'lsa-da, {price_word} shunga o'xshash mulklarga "
        "nisbatan haddan tashqari ko'rinadi. O'zbekiston bozorida yaxshiroq bitimlar topishingiz "
        "mumkin. {district} tumanidagi joylashuv va {condition} holat uning qiymatini oshirsa "
        "ham, narx bozor standartlaridan yuqori.",
    ],
}


def _format_number(value: float) -> str:
    return f"{value:g}"


def template_fields(data, price_ratio: float) -> dict:
    return {
        "property_type": PROPERTY_TYPE_TEXT[data.property_type],
        "price_word": PRICE_TEXT[data.property_type],
        "building_type": BUILDING_TYPE_TEXT[data.building_type],
        "condition": CONDITION_TEXT[data.condition],
        "city": data.city,
        "district": data.district,
        "size": _format_number(data.size),
        "rooms": data.rooms,
        "below": "sezilarli darajada past" if price_ratio < 0.7 else "past",
        "below_degree": "sezilarli darajada" if price_ratio < 0.7 else "seziladi",
        "above": "sezilarli darajada yuqori" if price_ratio > 1.3 else "bir oz yuqori",
    }


def explain(label: str, data, price_ratio: float, rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    template = rng.choice(TEMPLATES[label])
    return template.format(**template_fields(data, price_ratio))


# --------------------
# PER-FACTOR REASONS
# --------------------

def price_reason(price_per_sqm: float, expected: float, price_ratio: float) -> str:
    difference = abs(1 - price_ratio) * 100
    if price_ratio < 0.9:
        position = f"bozor o'rtachasidan {difference:.0f}% past"
    elif price_ratio <= 1.1:
        position = "bozor o'rtachasiga yaqin"
    else:
        position = f"bozor o'rtachasidan {difference:.0f}% yuqori"
    return (
        f"1 m² narxi ${price_per_sqm:,.2f}, hudud uchun kutilgan narx ${expected:,.2f} - "
        f"{position}."
    )


def location_reason(city: str, district: str, score: float) -> str:
    if score >= 9:
        level = "eng talab yuqori hududlardan biri"
    elif score >= 7:
        level = "infratuzilmasi yaxshi rivojlangan hudud"
    elif score >= 5:
        level = "o'rtacha talabga ega hudud"
    else:
        level = "arzon, talab past hudud"
    return f"{city}, {district} - {level}."


def building_reason(data, age: int) -> str:
    return (
        f"{BUILDING_TYPE_TEXT[data.building_type].capitalize()}, "
        f"{CONDITION_TEXT[data.condition]} holatda, {age} yillik bino, "
        f"{data.floor}/{data.total_floors} qavat."
    )


def amenities_reason(positive: list, negative: list) -> str:
    if not positive and not negative:
        return "Tavsifda qulayliklar haqida ma'lumot topilmadi."

    parts = []
    if positive:
        found = ", ".join(keywords[0] for keywords, _ in positive)
        parts.append(f"Afzalliklar: {found}")
    if negative:
        found = ", ".join(keywords[0] for keywords, _ in negative)
        parts.append(f"Kamchiliklar: {found}")
    return ". ".join(parts) + "."


def size_reason(size: float, rooms: int) -> str:
    if rooms == 0:
        return "Xonalar soni ko'rsatilmagan."
    return f"Har bir xonaga {size / rooms:.1f} m² to'g'ri keladi ({rooms} xona, {_format_number(size)} m²)."


def summary(label: str, score: float, city: str) -> str:
    if label == "Underpriced":
        verdict = "bozor narxidan arzon, yaxshi bitim"
    elif label == "Fair":
        verdict = "bozor narxiga mos"
    else:
        verdict = "bozor narxidan qimmat"
    return f"{city} bozorida umumiy baho {score}/10: mulk {verdict}."
