"""Seeded generators for synthetic personas, bias reports and copy suggestions.

Everything here is demo data. The vocabularies are fixed so the dashboard
looks plausible; the random draws come from a single Faker instance so that a
given seed reproduces the same sequence of records within a process (wall-clock
fields such as ``detectedAt`` excepted).
"""

from __future__ import annotations

from datetime import timezone
from typing import Dict, List, Optional

from faker import Faker

from inclusive_hub.schemas.bias import BIAS_TYPES, BiasDetection, BiasInsight, BiasMetadata, severity_for
from inclusive_hub.schemas.common import format_timestamp, round_half_up, utc_now_iso
from inclusive_hub.schemas.copy_suggestion import CopyMetadata, CopySuggestion, CopyVariant, Engagement
from inclusive_hub.schemas.persona import CampaignPersona, Demographics, DigitalPresence

BUSINESS_TYPES = [
    "Warung",
    "Toko Kelontong",
    "UMKM Fashion",
    "F&B",
    "Tourism",
    "Handicrafts",
    "Tech/Digital Services",
    "Beauty/Salon",
    "Agriculture",
    "Education",
]

SECTORS: Dict[str, str] = {
    "Warung": "Retail",
    "Toko Kelontong": "Retail",
    "UMKM Fashion": "Fashion & Apparel",
    "F&B": "Food & Beverage",
    "Tourism": "Tourism & Hospitality",
    "Handicrafts": "Crafts & Artisan",
    "Tech/Digital Services": "Technology",
    "Beauty/Salon": "Beauty & Wellness",
    "Agriculture": "Agriculture",
    "Education": "Education",
}

NAME_PREFIXES: Dict[str, List[str]] = {
    "Warung": ["Warung", "Kedai"],
    "Toko Kelontong": ["Toko", "Swalayan"],
    "UMKM Fashion": ["Butik", "Fashion"],
    "F&B": ["Kafe", "Resto", "Kedai Kopi"],
    "Tourism": ["Tour", "Wisata", "Travel"],
    "Handicrafts": ["Kerajinan", "Handmade"],
    "Tech/Digital Services": ["Digital", "Tech", "Studio"],
    "Beauty/Salon": ["Salon", "Beauty", "Klinik Kecantikan"],
    "Agriculture": ["Tani", "Agro", "Organik"],
    "Education": ["Kursus", "Les", "Bimbel"],
}

CITIES = [
    ("Jakarta", "DKI Jakarta"),
    ("Surabaya", "Jawa Timur"),
    ("Bandung", "Jawa Barat"),
    ("Medan", "Sumatera Utara"),
    ("Semarang", "Jawa Tengah"),
    ("Makassar", "Sulawesi Selatan"),
    ("Palembang", "Sumatera Selatan"),
    ("Tangerang", "Banten"),
    ("Depok", "Jawa Barat"),
    ("Bekasi", "Jawa Barat"),
    ("Yogyakarta", "DI Yogyakarta"),
    ("Malang", "Jawa Timur"),
    ("Denpasar", "Bali"),
    ("Bogor", "Jawa Barat"),
    ("Batam", "Kepulauan Riau"),
]

PAIN_POINTS = [
    "Limited digital presence and online visibility",
    "Difficulty reaching younger demographics",
    "Language barriers in marketing materials",
    "Budget constraints for advertising",
    "Lack of marketing expertise and resources",
    "Inconsistent brand messaging across channels",
    "Challenges with inclusive language",
    "Limited understanding of target audience",
    "Difficulty measuring marketing ROI",
    "Competition from larger businesses",
    "Seasonal revenue fluctuations",
    "Low social media engagement",
]

MARKETING_GOALS = [
    "Increase brand awareness in local community",
    "Attract more customers through social media",
    "Build inclusive brand identity",
    "Expand to new customer segments",
    "Improve customer retention",
    "Launch new products/services",
    "Establish online presence",
    "Create engaging content consistently",
    "Connect with millennial and Gen Z audiences",
    "Develop sustainable marketing strategy",
]

PLATFORMS = [
    "Instagram",
    "Facebook",
    "TikTok",
    "WhatsApp Business",
    "Tokopedia",
    "Shopee",
    "Twitter/X",
    "YouTube",
]

GENDERS = ["Male", "Female", "Non-binary"]
EDUCATION_LEVELS = ["High School", "Diploma", "Bachelor", "Master"]
REVENUE_BUCKETS = ["< 5 juta", "5-15 juta", "15-50 juta", "> 50 juta"]
AUDIENCE_AGES = ["18-24", "25-34", "35-44", "45-54", "55+"]
AUDIENCE_GROUPS = ["young professionals", "families", "students", "locals", "tourists"]

BIAS_EXAMPLES: Dict[str, Dict[str, object]] = {
    "gender": {
        "description": "Language reinforces traditional gender stereotypes",
        "affected_text": "Best for housewives and working men",
        "recommendation": 'Use gender-neutral language like "homemakers" and "professionals"',
        "examples": [
            'Replace "housewives" with "home managers" or "primary caregivers"',
            'Replace "working men" with "working professionals"',
        ],
    },
    "age": {
        "description": "Content assumes specific age demographics",
        "affected_text": "Perfect for young people and tech-savvy millennials",
        "recommendation": "Avoid age-specific assumptions; focus on interests instead",
        "examples": [
            'Replace "young people" with "active individuals"',
            'Replace "tech-savvy millennials" with "digital enthusiasts"',
        ],
    },
    "economic": {
        "description": "Language excludes lower-income segments",
        "affected_text": "Affordable luxury for the discerning elite",
        "recommendation": "Use inclusive pricing language without class implications",
        "examples": [
            'Replace "elite" with "everyone"',
            "Emphasize value rather than exclusivity",
        ],
    },
    "religious": {
        "description": "Assumes specific religious practices",
        "affected_text": "Open every day including Sundays",
        "recommendation": "Use neutral time references",
        "examples": [
            'Replace "including Sundays" with "7 days a week"',
            "Avoid religion-specific holiday references",
        ],
    },
    "ethnic": {
        "description": "May perpetuate ethnic stereotypes",
        "affected_text": "Traditional authentic Indonesian experience",
        "recommendation": "Be specific about cultural elements without stereotyping",
        "examples": [
            "Specify which regional culture is represented",
            'Avoid generalizations about "Indonesian" culture',
        ],
    },
    "disability": {
        "description": "Language may exclude people with disabilities",
        "affected_text": "Walk in today! See our amazing displays",
        "recommendation": "Use inclusive action verbs",
        "examples": [
            'Replace "walk in" with "visit us"',
            'Replace "see" with "explore" or "discover"',
        ],
    },
    "appearance": {
        "description": "Promotes specific beauty standards",
        "affected_text": "Get slim and beautiful with our program",
        "recommendation": "Focus on health and wellbeing, not appearance",
        "examples": [
            'Replace "slim and beautiful" with "healthy and confident"',
            "Emphasize feeling good rather than looking a certain way",
        ],
    },
}

GENERIC_TIPS = [
    "Review all marketing copy with an inclusive lens",
    "Test messaging with diverse focus groups",
    "Create a brand voice guide emphasizing inclusivity",
    "Train team on inclusive language best practices",
]

TYPE_TIPS = {
    "gender": "Implement gender-neutral language guidelines",
    "age": "Focus on lifestyle and interests rather than age",
    "economic": "Emphasize value accessibility for all income levels",
    "religious": "Use culturally neutral time and event references",
    "ethnic": "Celebrate specific cultures without stereotyping",
    "disability": "Ensure all calls-to-action are accessibility-focused",
    "appearance": "Promote health and confidence over specific looks",
}

BIAS_MODEL_VERSION = "kolosal-bias-v2.1"

ORIGINAL_COPY = {
    "en": "Visit our store for special offers! Perfect for housewives and office workers.",
    "id": "Kunjungi toko kami untuk penawaran spesial! Cocok untuk ibu rumah tangga dan pekerja kantoran.",
}

# Mock output covers five of the six accepted tones; "formal" has no canned rewrite.
VARIANT_TONES = ["professional", "friendly", "casual", "enthusiastic", "empathetic"]

VARIANT_TEXTS = {
    "en": {
        "professional": "We invite you to explore our exclusive offerings designed for busy professionals and home managers alike.",
        "friendly": "Come check out our amazing deals! Great for anyone managing a household or career.",
        "casual": "Stop by and see what we've got! Perfect for people juggling work and home life.",
        "enthusiastic": "Don't miss our incredible special offers! Ideal for anyone balancing professional and personal commitments!",
        "empathetic": "We understand your busy life. Discover solutions that work for professionals and caregivers.",
    },
    "id": {
        "professional": "Kami mengundang Anda untuk menjelajahi penawaran eksklusif kami yang dirancang untuk profesional dan pengelola rumah tangga.",
        "friendly": "Yuk mampir dan lihat penawaran menarik kami! Cocok untuk siapa saja yang mengelola rumah tangga atau karier.",
        "casual": "Mampir yuk, lihat apa yang kami punya! Pas banget buat yang sibuk dengan pekerjaan dan urusan rumah.",
        "enthusiastic": "Jangan lewatkan penawaran spesial kami yang luar biasa! Ideal untuk siapa saja yang menyeimbangkan komitmen profesional dan pribadi!",
        "empathetic": "Kami memahami kesibukan Anda. Temukan solusi yang cocok untuk profesional dan pengasuh.",
    },
}

HIGHLIGHTS = {
    "professional": ["Formal and respectful language", "Gender-neutral terminology", "Inclusive of all roles"],
    "friendly": ["Warm and approachable tone", "Casual without bias", "Welcoming to everyone"],
    "casual": ["Conversational and relatable", "Avoids stereotypes", "Appeals to diverse audiences"],
    "enthusiastic": ["Energetic and motivating", "Inclusive excitement", "Positive without exclusion"],
    "empathetic": ["Understanding and supportive", "Acknowledges diverse challenges", "Non-judgmental approach"],
}


def sector_for(business_type: str) -> str:
    return SECTORS.get(business_type, "Other")


def dedupe(items: List[str]) -> List[str]:
    """Drop repeats, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


class MockDataGenerator:
    """Produces personas, bias insights and copy suggestions from one seeded source."""

    def __init__(self, seed: Optional[int] = None, locale: str = "id_ID") -> None:
        self._faker = Faker(locale)
        if seed is not None:
            self._faker.seed_instance(seed)
        self._rng = self._faker.random

    def _pick(self, items):
        return self._rng.choice(items)

    def _sample(self, items, low: int, high: int) -> list:
        return self._rng.sample(items, self._rng.randint(low, high))

    def _uniform(self, low: float, high: float, digits: int) -> float:
        return round(self._rng.uniform(low, high), digits)

    def _target_audience(self) -> str:
        return f"{self._pick(AUDIENCE_GROUPS)} aged {self._pick(AUDIENCE_AGES)}"

    def _business_name(self, business_type: str) -> str:
        prefix = self._pick(NAME_PREFIXES.get(business_type, [""]))
        token = self._pick(
            [
                self._faker.first_name(),
                self._faker.city().split(" ")[0],
                self._faker.word(),
            ]
        )
        return f"{prefix} {token}".strip()

    def persona(self) -> CampaignPersona:
        city, province = self._pick(CITIES)
        business_type = self._pick(BUSINESS_TYPES)
        has_digital = self._rng.random() < 0.6
        has_website = has_digital and self._rng.random() < 0.3
        created_at = self._faker.date_time_between(start_date="-30d", end_date="now", tzinfo=timezone.utc)

        return CampaignPersona(
            id=self._faker.uuid4(),
            name=self._faker.name(),
            business_name=self._business_name(business_type),
            business_type=business_type,
            sector=sector_for(business_type),
            city=city,
            province=province,
            demographics=Demographics(
                age=self._rng.randint(25, 65),
                gender=self._pick(GENDERS),
                education=self._pick(EDUCATION_LEVELS),
                experience=f"{self._rng.randint(1, 20)} years",
            ),
            pain_points=self._sample(PAIN_POINTS, 2, 4),
            marketing_goals=self._sample(MARKETING_GOALS, 2, 3),
            target_audience=self._target_audience(),
            monthly_revenue=self._pick(REVENUE_BUCKETS),
            digital_presence=DigitalPresence(
                has_website=has_website,
                has_social_media=has_digital,
                platforms=self._sample(PLATFORMS, 1, 4) if has_digital else [],
                monthly_posts=self._rng.randint(0, 30) if has_digital else 0,
            ),
            created_at=format_timestamp(created_at),
        )

    def personas(self, count: int) -> List[CampaignPersona]:
        return [self.persona() for _ in range(count)]

    def bias_detection(self, bias_type: str) -> BiasDetection:
        example = BIAS_EXAMPLES[bias_type]
        return BiasDetection(
            type=bias_type,
            description=example["description"],
            affected_text=example["affected_text"],
            score=self._rng.randint(40, 95),
            recommendation=example["recommendation"],
            examples=list(example["examples"]),
        )

    def bias_insight(self, campaign_id: str) -> BiasInsight:
        detected = self._sample(list(BIAS_TYPES), 1, 4)
        biases = [self.bias_detection(bias_type) for bias_type in detected]
        overall = round_half_up(sum(b.score for b in biases) / len(biases))
        suggestions = dedupe(GENERIC_TIPS[:2] + [TYPE_TIPS[b.type] for b in biases])

        return BiasInsight(
            id=self._faker.uuid4(),
            campaign_id=campaign_id,
            detected_at=utc_now_iso(),
            overall_score=overall,
            severity=severity_for(overall),
            biases=biases,
            suggestions=suggestions,
            metadata=BiasMetadata(
                model_version=BIAS_MODEL_VERSION,
                confidence=self._uniform(0.75, 0.99, 2),
            ),
        )

    def copy_variant(self, language: str, tone: str) -> CopyVariant:
        return CopyVariant(
            id=self._faker.uuid4(),
            text=VARIANT_TEXTS[language][tone],
            language=language,
            tone=tone,
            inclusivity_score=self._rng.randint(80, 99),
            bias_score=self._rng.randint(5, 25),
            engagement=Engagement(
                predicted=self._uniform(2.5, 8.5, 1),
                confidence=self._uniform(0.7, 0.95, 2),
            ),
            highlights=list(HIGHLIGHTS.get(tone, [])),
        )

    def copy_suggestion(self, campaign_id: str, language: str = "en") -> CopySuggestion:
        if language not in ORIGINAL_COPY:
            language = "en"
        return CopySuggestion(
            id=self._faker.uuid4(),
            campaign_id=campaign_id,
            language=language,
            original=ORIGINAL_COPY[language],
            suggestions=[self.copy_variant(language, tone) for tone in VARIANT_TONES],
            created_at=utc_now_iso(),
            metadata=CopyMetadata(
                target_audience=self._target_audience(),
                tone=self._pick(VARIANT_TONES),
                inclusivity_score=self._rng.randint(75, 98),
            ),
        )
