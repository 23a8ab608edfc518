"""Prompt builders for the plant AI service."""

from plantcare.ai.models import UNKNOWN, ClimatePlantInput, ClimateWeatherInput, GrowthInput

IDENTIFY_PROMPT = (
    "Identify this plant species. Return only the plant name and a brief description."
)

DIAGNOSIS_PROMPT = """Analyze this plant image for comprehensive health assessment. \
Provide detailed analysis including:

1. PRIMARY DIAGNOSIS: Main health issue or condition
2. SEVERITY LEVEL: Low/Moderate/High/Critical
3. VISUAL SYMPTOMS: Specific symptoms visible in the image
4. ROOT CAUSE: Likely cause of the problem
5. TREATMENT PLAN: Step-by-step treatment recommendations
6. TIMELINE: Expected recovery time
7. PREVENTION: How to prevent this issue in the future
8. CONFIDENCE: Your confidence level in this diagnosis (0-100%)

Format the response in a structured, easy-to-read manner with clear sections."""


def _value(value: object) -> str:
    if value is None or value == "":
        return UNKNOWN
    return str(value)


def build_identify_prompt() -> str:
    """Build the plant identification prompt."""
    return IDENTIFY_PROMPT


def build_diagnosis_prompt() -> str:
    """Build the plant health diagnosis prompt."""
    return DIAGNOSIS_PROMPT


def build_care_advice_prompt(species: str, question: str) -> str:
    """Build a care advice prompt.

    :param species: Plant species.
    :param question: The user's question.
    :returns: Prompt text.
    """
    return (
        f"Provide specific care advice for {species}. Question: {question}. "
        "Give practical, actionable recommendations."
    )


def build_care_schedule_prompt(species: str, location: str, conditions: str) -> str:
    """Build a personalised care schedule prompt.

    :param species: Plant species.
    :param location: Where the plant is kept.
    :param conditions: Current growing conditions.
    :returns: Prompt text.
    """
    return f"""Create a detailed, personalized care schedule for {species} in {location} \
with these conditions: {conditions}.

Please provide a comprehensive schedule including:
- Watering frequency and best practices
- Fertilizing schedule and recommendations
- Pruning/trimming guidelines
- Repotting timeline and tips
- Light requirements and positioning
- Temperature and humidity preferences
- Seasonal adjustments
- Common issues to watch for

Format the response in a clear, easy-to-follow structure with specific timeframes \
and actionable steps."""


def build_growth_prompt(plant: GrowthInput) -> str:
    """Build a one-month growth prediction prompt.

    :param plant: Plant details.
    :returns: Prompt text.
    """
    return (
        f"Predict the growth of a {plant.species} plant over the next month. "
        f"Current age: {_value(plant.age_weeks)} weeks. "
        f"Health: {_value(plant.health)}. "
        f"Last repot: {_value(plant.last_repot)}. "
        f"Last prune: {_value(plant.last_prune)}. "
        f"Location: {_value(plant.location)}. "
        f"Notes: {_value(plant.notes)}. "
        "Give a friendly, visual description of expected changes (new leaves, height, etc)."
    )


def build_climate_care_prompt(plant: ClimatePlantInput, weather: ClimateWeatherInput) -> str:
    """Build a weather-aware care prompt.

    :param plant: Plant details.
    :param weather: Current weather details.
    :returns: Prompt text.
    """
    return f"""Provide climate-optimized care recommendations for {plant.species} in \
{_value(plant.location)} with current conditions: {_value(plant.conditions)}.

Current weather data:
- Temperature: {_value(weather.temperature)}
- Humidity: {_value(weather.humidity)}
- Season: {_value(weather.season)}
- Forecast: {_value(weather.forecast)}

Please provide:
1. WATERING ADJUSTMENTS: How to modify watering based on current weather
2. LIGHT POSITIONING: Optimal placement considering current conditions
3. TEMPERATURE PROTECTION: Any needed adjustments for temperature
4. HUMIDITY MANAGEMENT: Recommendations for humidity levels
5. SEASONAL ADAPTATIONS: Specific changes for current season
6. WEATHER ALERTS: Any immediate actions needed based on forecast
7. OPTIMAL TIMING: Best times for care activities given weather

Format as clear, actionable recommendations."""
