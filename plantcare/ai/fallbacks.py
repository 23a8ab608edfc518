"""Static fallback answers served when the generative model is unavailable."""

import random
from dataclasses import dataclass

from plantcare.ai.models import UNKNOWN, ClimatePlantInput, ClimateWeatherInput, GrowthInput

IDENTIFICATIONS: tuple[str, ...] = (
    "Monstera deliciosa\n"
    "A popular tropical plant known for its distinctive split leaves. Native to Central "
    "America, it's commonly called the Swiss Cheese Plant due to its unique leaf perforations.",
    "Snake Plant (Sansevieria trifasciata)\n"
    "A hardy, low-maintenance plant with tall, upright leaves. Excellent for beginners and "
    "known for its air-purifying qualities.",
    "Pothos (Epipremnum aureum)\n"
    "A versatile trailing plant with heart-shaped leaves. Perfect for hanging baskets and "
    "known for its ability to thrive in various light conditions.",
    "ZZ Plant (Zamioculcas zamiifolia)\n"
    "A drought-tolerant plant with glossy, dark green leaves. Known for its ability to "
    "survive in low-light conditions with minimal care.",
)


@dataclass(frozen=True)
class DiagnosisRecord:
    """A canned diagnosis rendered in the same layout as a live one."""

    condition: str
    severity: str
    confidence: int
    symptoms: str
    root_cause: str
    treatment: str
    timeline: str
    prevention: str
    additional_notes: str

    def render(self) -> str:
        """Render the diagnosis as sectioned plain text."""
        return (
            f"PRIMARY DIAGNOSIS: {self.condition}\n"
            f"SEVERITY LEVEL: {self.severity}\n"
            f"CONFIDENCE: {self.confidence}%\n\n"
            f"VISUAL SYMPTOMS:\n{self.symptoms}\n\n"
            f"ROOT CAUSE:\n{self.root_cause}\n\n"
            f"TREATMENT PLAN:\n{self.treatment}\n\n"
            f"TIMELINE:\n{self.timeline}\n\n"
            f"PREVENTION:\n{self.prevention}\n\n"
            f"ADDITIONAL NOTES:\n{self.additional_notes}"
        )


DIAGNOSES: tuple[DiagnosisRecord, ...] = (
    DiagnosisRecord(
        condition="Overwatering",
        severity="Moderate",
        confidence=85,
        symptoms="Yellowing leaves, soft/mushy stems, waterlogged soil, root rot visible",
        root_cause="Excessive watering frequency or poor drainage",
        treatment=(
            "1. Stop watering immediately\n"
            "2. Remove from pot and inspect roots\n"
            "3. Trim any black/mushy roots\n"
            "4. Repot in fresh, well-draining soil\n"
            "5. Resume watering only when top 2 inches are dry"
        ),
        timeline="2-4 weeks for recovery",
        prevention=(
            "Use well-draining soil, check moisture before watering, "
            "ensure pot has drainage holes"
        ),
        additional_notes="Consider using a moisture meter to prevent overwatering in the future.",
    ),
    DiagnosisRecord(
        condition="Nutrient Deficiency",
        severity="Low",
        confidence=78,
        symptoms="Pale leaves with green veins, stunted growth, yellowing between veins",
        root_cause="Insufficient fertilization or poor soil quality",
        treatment=(
            "1. Apply balanced liquid fertilizer\n"
            "2. Consider repotting with fresh soil\n"
            "3. Monitor new growth for improvement\n"
            "4. Maintain regular feeding schedule"
        ),
        timeline="3-6 weeks for visible improvement",
        prevention="Use quality potting mix, fertilize regularly during growing season",
        additional_notes=(
            "Different deficiencies show different symptoms - "
            "this appears to be iron or nitrogen deficiency."
        ),
    ),
    DiagnosisRecord(
        condition="Pest Infestation",
        severity="High",
        confidence=92,
        symptoms="Small white spots, webbing, visible insects, sticky residue on leaves",
        root_cause="Spider mites or mealybugs, likely due to dry conditions",
        treatment=(
            "1. Isolate plant immediately\n"
            "2. Wash leaves with mild soap solution\n"
            "3. Apply neem oil or insecticidal soap\n"
            "4. Repeat treatment every 7 days\n"
            "5. Increase humidity around plant"
        ),
        timeline="2-3 weeks to eliminate pests",
        prevention="Regular inspection, maintain proper humidity, avoid overcrowding plants",
        additional_notes="Check other nearby plants for signs of infestation.",
    ),
    DiagnosisRecord(
        condition="Insufficient Light",
        severity="Moderate",
        confidence=81,
        symptoms="Leggy growth, small leaves, pale coloring, leaning toward light source",
        root_cause="Plant not receiving adequate light for its species",
        treatment=(
            "1. Move to brighter location gradually\n"
            "2. Consider supplemental grow lights\n"
            "3. Rotate plant regularly for even growth\n"
            "4. Prune leggy stems to encourage bushiness"
        ),
        timeline="4-8 weeks for new growth to appear",
        prevention="Research light requirements for plant species, use light meters if needed",
        additional_notes="Sudden exposure to bright light can cause sunburn - acclimate gradually.",
    ),
)


def fallback_identification(rng: random.Random | None = None) -> str:
    """Pick a canned plant identification.

    :param rng: Optional random generator.
    :returns: Identification text.
    """
    return (rng or random).choice(IDENTIFICATIONS)


def fallback_diagnosis(rng: random.Random | None = None) -> str:
    """Pick and render a canned diagnosis.

    :param rng: Optional random generator.
    :returns: Diagnosis text.
    """
    return (rng or random).choice(DIAGNOSES).render()


def fallback_care_advice(species: str, question: str | None) -> str:
    """Build generic care advice.

    :param species: Plant species.
    :param question: The user's question.
    :returns: Advice text.
    """
    return (
        f"Care advice for {species}: {question or 'general care'}\n\n"
        "Water when the top inch of soil feels dry. Provide bright, indirect light. "
        "Maintain humidity around 50-60%. Fertilize monthly during growing season with "
        "balanced fertilizer. Repot every 1-2 years in well-draining soil."
    )


def fallback_care_schedule(species: str, location: str, conditions: str | None) -> str:
    """Build a generic care schedule.

    :param species: Plant species.
    :param location: Where the plant is kept.
    :param conditions: Current growing conditions.
    :returns: Schedule text.
    """
    return f"""Personalized Care Schedule for {species} in {location}:

🌱 WATERING SCHEDULE:
• Water every 7-10 days during growing season (spring/summer)
• Reduce to every 10-14 days in fall/winter
• Check soil moisture before watering - top 1-2 inches should be dry
• Use room temperature water and ensure good drainage

🌿 FERTILIZING:
• Apply balanced liquid fertilizer monthly during spring/summer
• Use half-strength fertilizer for young plants
• Stop fertilizing in fall/winter months
• Consider slow-release fertilizer for consistent nutrition

✂️ PRUNING & MAINTENANCE:
• Remove dead or yellowing leaves as needed
• Trim leggy growth to encourage bushiness
• Prune after flowering to maintain shape
• Clean leaves monthly with damp cloth

🪴 REPOTTING:
• Repot every 1-2 years in spring
• Choose pot 1-2 inches larger than current
• Use well-draining potting mix
• Water thoroughly after repotting

☀️ LIGHT & POSITIONING:
• Provide bright, indirect light
• Avoid direct sunlight to prevent leaf burn
• Rotate plant weekly for even growth
• Consider grow lights in low-light areas

🌡️ TEMPERATURE & HUMIDITY:
• Maintain 65-75°F (18-24°C) temperature
• Keep humidity around 50-60%
• Avoid cold drafts and heating vents
• Use humidifier in dry conditions

⚠️ WATCH FOR:
• Yellow leaves (overwatering)
• Brown tips (low humidity)
• Leggy growth (insufficient light)
• Pests (check regularly)

This schedule is based on your plant's current conditions: {conditions or UNKNOWN}"""


def fallback_growth_prediction(plant: GrowthInput) -> str:
    """Build a generic growth prediction.

    :param plant: Plant details.
    :returns: Prediction text.
    """
    return (
        f"In the next month, your {plant.species} is likely to grow 2-3 new leaves and "
        "become noticeably fuller. Keep up the good care! 🌱"
    )


def fallback_climate_care(plant: ClimatePlantInput, weather: ClimateWeatherInput) -> str:
    """Build generic weather-aware care recommendations.

    :param plant: Plant details.
    :param weather: Current weather details.
    :returns: Recommendations text.
    """
    if weather.forecast:
        forecast_line = f"Based on forecast: {weather.forecast}"
    else:
        forecast_line = "Monitor local weather for extreme conditions"
    temperature = UNKNOWN if weather.temperature is None else weather.temperature

    return f"""Climate-Optimized Care for {plant.species} in {plant.location or UNKNOWN}:

🌡️ TEMPERATURE ADJUSTMENTS:
• Current temperature: {temperature}
• Move plant away from cold drafts if temperature drops below 60°F
• Consider moving to warmer location during cold spells
• Monitor for temperature stress signs

💧 WATERING ADJUSTMENTS:
• Reduce watering frequency in cooler weather
• Increase humidity if indoor heating is active
• Check soil moisture more frequently during temperature changes
• Water in morning to allow drying before night

☀️ LIGHT POSITIONING:
• Maximize natural light exposure during shorter days
• Consider supplemental lighting if needed
• Rotate plant weekly for even growth
• Protect from intense afternoon sun if temperatures are high

🌧️ WEATHER-BASED RECOMMENDATIONS:
• {forecast_line}
• Bring outdoor plants inside if frost is expected
• Increase ventilation during humid periods
• Protect from strong winds if applicable

⏰ OPTIMAL CARE TIMING:
• Water early morning for best absorption
• Fertilize during active growth periods
• Prune during dormancy or early spring
• Repot in spring when temperatures are stable

🛡️ PROTECTIVE MEASURES:
• Use humidity trays during dry periods
• Consider plant covers for temperature protection
• Monitor for weather-related stress signs
• Adjust care schedule based on weather patterns"""
