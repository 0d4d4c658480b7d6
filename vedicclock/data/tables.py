"""Static reference tables for the Vedic calendar.

Pure data keyed by 1-based position.  Calculators look names up here
instead of encoding them in conditionals.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

__all__ = [
    "MASA_DEFINITIONS",
    "MUHURTA_DEFINITIONS",
    "MuhurtaCategory",
    "MasaDefinition",
    "MuhurtaDefinition",
    "NAKSHATRA_DEFINITIONS",
    "NakshatraDefinition",
    "RASHI_DEFINITIONS",
    "RashiDefinition",
    "TITHI_DEFINITIONS",
    "TithiDefinition",
    "lookup",
]

MuhurtaCategory = Literal["auspicious", "neutral", "inauspicious"]


@dataclass(frozen=True, slots=True)
class TithiDefinition:
    name: str
    sanskrit: str


@dataclass(frozen=True, slots=True)
class NakshatraDefinition:
    name: str
    sanskrit: str
    deity: str
    symbol: str


@dataclass(frozen=True, slots=True)
class MasaDefinition:
    name: str
    sanskrit: str


@dataclass(frozen=True, slots=True)
class RashiDefinition:
    name: str
    western: str


@dataclass(frozen=True, slots=True)
class MuhurtaDefinition:
    name: str
    sanskrit: str
    category: MuhurtaCategory
    significance: str
    best_for: tuple[str, ...] = ()
    ruling_deity: str | None = None
    notes: str = ""


# Both pakshas share the first fourteen names; the fifteenth is the
# full moon in Shukla and the new moon in Krishna.
TITHI_DEFINITIONS: Sequence[TithiDefinition] = (
    TithiDefinition("Pratipad", "प्रतिपदा"),
    TithiDefinition("Dwitiya", "द्वितीया"),
    TithiDefinition("Tritiya", "तृतीया"),
    TithiDefinition("Chaturthi", "चतुर्थी"),
    TithiDefinition("Panchami", "पञ्चमी"),
    TithiDefinition("Shashthi", "षष्ठी"),
    TithiDefinition("Saptami", "सप्तमी"),
    TithiDefinition("Ashtami", "अष्टमी"),
    TithiDefinition("Navami", "नवमी"),
    TithiDefinition("Dashami", "दशमी"),
    TithiDefinition("Ekadashi", "एकादशी"),
    TithiDefinition("Dwadashi", "द्वादशी"),
    TithiDefinition("Trayodashi", "त्रयोदशी"),
    TithiDefinition("Chaturdashi", "चतुर्दशी"),
    TithiDefinition("Purnima", "पूर्णिमा"),
    TithiDefinition("Amavasya", "अमावस्या"),
)

NAKSHATRA_DEFINITIONS: Sequence[NakshatraDefinition] = (
    NakshatraDefinition("Ashwini", "अश्विनी", "Ashwini Kumaras", "Horse Head"),
    NakshatraDefinition("Bharani", "भरणी", "Yama", "Yoni"),
    NakshatraDefinition("Krittika", "कृत्तिका", "Agni", "Razor"),
    NakshatraDefinition("Rohini", "रोहिणी", "Brahma", "Cart"),
    NakshatraDefinition("Mrigashira", "मृगशिरा", "Soma", "Deer Head"),
    NakshatraDefinition("Ardra", "आर्द्रा", "Rudra", "Teardrop"),
    NakshatraDefinition("Punarvasu", "पुनर्वसु", "Aditi", "Bow and Quiver"),
    NakshatraDefinition("Pushya", "पुष्य", "Brihaspati", "Flower"),
    NakshatraDefinition("Ashlesha", "अश्लेषा", "Nagas", "Serpent"),
    NakshatraDefinition("Magha", "मघा", "Pitris", "Throne"),
    NakshatraDefinition("Purva Phalguni", "पूर्व फाल्गुनी", "Bhaga", "Hammock"),
    NakshatraDefinition("Uttara Phalguni", "उत्तर फाल्गुनी", "Aryaman", "Bed"),
    NakshatraDefinition("Hasta", "हस्त", "Savitar", "Hand"),
    NakshatraDefinition("Chitra", "चित्रा", "Vishwakarma", "Pearl"),
    NakshatraDefinition("Swati", "स्वाति", "Vayu", "Coral"),
    NakshatraDefinition("Vishakha", "विशाखा", "Indra-Agni", "Archway"),
    NakshatraDefinition("Anuradha", "अनुराधा", "Mitra", "Lotus"),
    NakshatraDefinition("Jyeshtha", "ज्येष्ठा", "Indra", "Earring"),
    NakshatraDefinition("Mula", "मूल", "Nirriti", "Root"),
    NakshatraDefinition("Purva Ashadha", "पूर्वाषाढ़ा", "Apas", "Elephant Tusk"),
    NakshatraDefinition("Uttara Ashadha", "उत्तराषाढ़ा", "Vishvadevas", "Elephant Tusk"),
    NakshatraDefinition("Shravana", "श्रवण", "Vishnu", "Ear"),
    NakshatraDefinition("Dhanishta", "धनिष्ठा", "Vasus", "Drum"),
    NakshatraDefinition("Shatabhisha", "शतभिषा", "Varuna", "Empty Circle"),
    NakshatraDefinition("Purva Bhadrapada", "पूर्वभाद्रपदा", "Aja Ekapada", "Sword"),
    NakshatraDefinition("Uttara Bhadrapada", "उत्तरभाद्रपदा", "Ahir Budhnya", "Twins"),
    NakshatraDefinition("Revati", "रेवती", "Pushan", "Fish"),
)

MASA_DEFINITIONS: Sequence[MasaDefinition] = (
    MasaDefinition("Chaitra", "चैत्र"),
    MasaDefinition("Vaishakha", "वैशाख"),
    MasaDefinition("Jyeshtha", "ज्येष्ठ"),
    MasaDefinition("Ashadha", "आषाढ़"),
    MasaDefinition("Shravana", "श्रावण"),
    MasaDefinition("Bhadrapada", "भाद्रपद"),
    MasaDefinition("Ashwin", "आश्विन"),
    MasaDefinition("Kartik", "कार्तिक"),
    MasaDefinition("Margashirsha", "मार्गशीर्ष"),
    MasaDefinition("Pausha", "पौष"),
    MasaDefinition("Magha", "माघ"),
    MasaDefinition("Phalguna", "फाल्गुन"),
)

RASHI_DEFINITIONS: Sequence[RashiDefinition] = (
    RashiDefinition("Mesha", "Aries"),
    RashiDefinition("Vrishabha", "Taurus"),
    RashiDefinition("Mithuna", "Gemini"),
    RashiDefinition("Karka", "Cancer"),
    RashiDefinition("Simha", "Leo"),
    RashiDefinition("Kanya", "Virgo"),
    RashiDefinition("Tula", "Libra"),
    RashiDefinition("Vrishchika", "Scorpio"),
    RashiDefinition("Dhanu", "Sagittarius"),
    RashiDefinition("Makara", "Capricorn"),
    RashiDefinition("Kumbha", "Aquarius"),
    RashiDefinition("Meena", "Pisces"),
)

MUHURTA_DEFINITIONS: Sequence[MuhurtaDefinition] = (
    MuhurtaDefinition(
        "Rudra", "रुद्र", "inauspicious", "Ruled by Rudra, the fierce form of Shiva",
        ("meditation", "spiritual practices", "inner work"), "Rudra (Shiva)",
        "Avoid starting new ventures. Good for destruction of negativity.",
    ),
    MuhurtaDefinition(
        "Ahi", "आहि", "neutral", "Serpent energy, transformation and renewal",
        ("healing", "transformation", "letting go"), "Serpent deity",
        "Time for releasing old patterns and embracing change.",
    ),
    MuhurtaDefinition(
        "Mitra", "मित्र", "auspicious", "Friend, harmony, and cooperation",
        ("social gatherings", "partnerships", "agreements"), "Mitra",
        "Excellent for building relationships and cooperation.",
    ),
    MuhurtaDefinition(
        "Pitri", "पितृ", "neutral", "Ancestors, tradition, and heritage",
        ("ancestral worship", "family matters", "remembrance"), "Pitris (Ancestors)",
        "Good for honoring elders and ancestral traditions.",
    ),
    MuhurtaDefinition(
        "Vasu", "वसु", "auspicious", "Wealth, prosperity, and abundance",
        ("business", "finance", "accumulation"), "Vasus (wealth gods)",
        "Favorable for financial matters and material prosperity.",
    ),
    MuhurtaDefinition(
        "Vara", "वर", "auspicious", "Excellence, boons, and blessings",
        ("important ceremonies", "prayers", "seeking blessings"), "Various beneficent deities",
        "Ideal for auspicious ceremonies and receiving blessings.",
    ),
    MuhurtaDefinition(
        "Vishve", "विश्वे", "auspicious", "Universal deities, cosmic harmony",
        ("group activities", "community work", "universal prayers"), "Vishvedevas",
        "Excellent for collective welfare and community endeavors.",
    ),
    MuhurtaDefinition(
        "Vidhi", "विधि", "auspicious", "Divine law, proper procedure",
        ("legal matters", "formal procedures", "rituals"), "Brahma (Creator)",
        "Best for following proper protocols and legal processes.",
    ),
    MuhurtaDefinition(
        "Satamukhi", "सतमुखी", "neutral", "Many-faced, adaptability",
        ("versatile activities", "learning", "adaptation"), None,
        "Time for flexibility and handling multiple tasks.",
    ),
    MuhurtaDefinition(
        "Puruhuta", "पुरुहूत", "auspicious", "Much invoked, sacred power",
        ("prayers", "invocations", "spiritual work"), "Indra",
        "Powerful time for invoking divine assistance.",
    ),
    MuhurtaDefinition(
        "Vahini", "वाहिनी", "neutral", "Carrier, movement, flow",
        ("travel", "transportation", "communication"), None,
        "Good for journeys and moving things forward.",
    ),
    MuhurtaDefinition(
        "Naktanara", "नक्तनार", "neutral", "Night wanderer, transition",
        ("rest", "contemplation", "night activities"), None,
        "Time for winding down and introspection.",
    ),
    MuhurtaDefinition(
        "Varuna", "वरुण", "auspicious", "Water deity, cosmic law, truth",
        ("purification", "truth-seeking", "justice"), "Varuna",
        "Excellent for matters of truth and righteousness.",
    ),
    MuhurtaDefinition(
        "Aryama", "अर्यमा", "auspicious", "Hospitality, nobility, customs",
        ("social functions", "hosting", "cultural events"), "Aryaman",
        "Perfect for hosting guests and social gatherings.",
    ),
    MuhurtaDefinition(
        "Bhaga", "भग", "auspicious", "Fortune, prosperity, share",
        ("wealth creation", "distribution", "generosity"), "Bhaga",
        "Favorable for receiving and sharing prosperity.",
    ),
    MuhurtaDefinition(
        "Girisha", "गिरीश", "neutral", "Lord of mountains, steadfastness",
        ("stability", "meditation", "determination"), "Shiva",
        "Good for building strong foundations and resolve.",
    ),
    MuhurtaDefinition(
        "Ajapada", "अजपाद", "neutral", "Unborn foot, mysterious power",
        ("mystical practices", "hidden knowledge", "occult"), None,
        "Time for exploring deeper mysteries.",
    ),
    MuhurtaDefinition(
        "Ahirbudhnya", "अहिर्बुध्न्य", "neutral", "Serpent of the deep, hidden wisdom",
        ("deep study", "research", "uncovering secrets"), "Ahirbudhnya",
        "Excellent for profound learning and research.",
    ),
    MuhurtaDefinition(
        "Pushan", "पूषन्", "auspicious", "Nourisher, protector of travelers",
        ("journeys", "animal care", "nutrition"), "Pushan",
        "Ideal for starting journeys and caring for animals.",
    ),
    MuhurtaDefinition(
        "Ashvini", "अश्विनी", "auspicious", "Divine healers, swift action",
        ("healing", "medicine", "quick decisions"), "Ashvini Kumaras",
        "Best time for medical treatments and healing arts.",
    ),
    MuhurtaDefinition(
        "Yama", "यम", "inauspicious", "Death deity, endings, justice",
        ("endings", "letting go", "karma work"), "Yama",
        "Avoid new beginnings. Good for completion and closure.",
    ),
    MuhurtaDefinition(
        "Agni", "अग्नि", "auspicious", "Fire deity, purification, transformation",
        ("ceremonies", "purification", "spiritual practices"), "Agni",
        "Excellent for fire ceremonies and purification rites.",
    ),
    MuhurtaDefinition(
        "Vidhatri", "विधातृ", "auspicious", "Creator, ordainer of destiny",
        ("planning", "designing", "creative work"), "Brahma",
        "Perfect for creative projects and future planning.",
    ),
    MuhurtaDefinition(
        "Kanda", "कण्ड", "neutral", "Sections, divisions, organization",
        ("organization", "categorization", "structure"), None,
        "Good for organizing and bringing order to chaos.",
    ),
    MuhurtaDefinition(
        "Aditi", "अदिति", "auspicious", "Mother of gods, boundless, freedom",
        ("liberation", "new beginnings", "motherhood"), "Aditi",
        "Highly auspicious for all new ventures and growth.",
    ),
    MuhurtaDefinition(
        "Jiva", "जीव", "auspicious", "Life force, immortality, vitality",
        ("health", "longevity", "vitality practices"), None,
        "Most auspicious muhurta. Excellent for all activities.",
    ),
    MuhurtaDefinition(
        "Vishnu", "विष्णु", "auspicious", "Preserver, sustainer, protection",
        ("preservation", "maintenance", "protection"), "Vishnu",
        "Ideal for matters requiring divine protection and sustenance.",
    ),
    MuhurtaDefinition(
        "Dyumadgadyuti", "द्युमद्गद्युति", "auspicious", "Brilliant splendor, radiance",
        ("celebrations", "performances", "display"), None,
        "Perfect for events requiring brilliance and grandeur.",
    ),
    MuhurtaDefinition(
        "Brahma", "ब्रह्मा", "auspicious", "Creator, supreme knowledge",
        ("learning", "teaching", "sacred knowledge"), "Brahma",
        "Supreme for education and spiritual enlightenment.",
    ),
    MuhurtaDefinition(
        "Samudram", "समुद्रम्", "neutral", "Ocean, vastness, collective unconscious",
        ("contemplation", "depth work", "emotional healing"), None,
        "Time for diving deep into emotions and the subconscious.",
    ),
)


def lookup(table: Sequence, number: int):
    """Return the entry for 1-based ``number``, wrapping past the table end."""

    if number < 1:
        raise ValueError(f"1-based index expected, got {number}")
    return table[(number - 1) % len(table)]
