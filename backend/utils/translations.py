"""
Recommender dialog strings in Azerbaijani, English and Russian.
Use  t(key, lang)  for single strings, falling back to Azerbaijani.
Use  t_options(group, lang)  for the option labels of a form field.
"""

from models.language import Language

FALLBACK_LANGUAGE = Language.AZ


def _lang(lang: Language | str) -> str:
    return lang.value if isinstance(lang, Language) else str(lang)


def t(key: str, lang: Language | str = FALLBACK_LANGUAGE, **kwargs) -> str:
    """Return translated string, falling back to Azerbaijani, then to the key itself."""
    entry = _T.get(key, {})
    text = entry.get(_lang(lang)) or entry.get(FALLBACK_LANGUAGE.value, key)
    if kwargs:
        text = text.format(**kwargs)
    return text


def t_options(group: str, lang: Language | str = FALLBACK_LANGUAGE) -> dict[str, str]:
    entry = _OPTIONS.get(group, {})
    return dict(entry.get(_lang(lang)) or entry.get(FALLBACK_LANGUAGE.value, {}))


def labels(lang: Language | str) -> dict[str, str]:
    return {key: t(key, lang) for key in _T if key not in _TEMPLATES}


_T = {
    "title": {
        "az": "AI Ölkə Təklifi",
        "en": "AI Country Recommendation",
        "ru": "Рекомендация страны от AI",
    },
    "description": {
        "az": "Büdcənizi və maraqlarınızı seçin, AI sizin üçün ən uyğun ölkəni təklif etsin.",
        "en": "Select your budget and interests, and let AI suggest the best country for you.",
        "ru": "Выберите свой бюджет и интересы, и AI предложит вам лучшую страну.",
    },
    "budget": {
        "az": "Büdcəniz",
        "en": "Your Budget",
        "ru": "Ваш бюджет",
    },
    "travel_style": {
        "az": "Səyahət Tərziniz",
        "en": "Your Travel Style",
        "ru": "Ваш стиль путешествия",
    },
    "interests": {
        "az": "Maraqlarınız",
        "en": "Your Interests",
        "ru": "Ваши интересы",
    },
    "get_recommendation": {
        "az": "Təklif Al",
        "en": "Get Recommendation",
        "ru": "Получить рекомендацию",
    },
    "recommendation_title": {
        "az": "AI Təklifi",
        "en": "AI Recommendation",
        "ru": "Рекомендация AI",
    },
    "recommendation_error": {
        "az": "Təklif alarkən xəta baş verdi.",
        "en": "An error occurred while getting the recommendation.",
        "ru": "Произошла ошибка при получении рекомендации.",
    },
    "no_countries_error": {
        "az": "Sistemdə heç bir ölkə tapılmadı. Zəhmət olmasa, daha sonra yenidən cəhd edin.",
        "en": "No countries found in the system. Please try again later.",
        "ru": "В системе не найдено стран. Пожалуйста, повторите попытку позже.",
    },
    "error_title": {
        "az": "Xəta",
        "en": "Error",
        "ru": "Ошибка",
    },
    "go_to_country": {
        "az": "Ölkəyə Keçid",
        "en": "Go to Country",
        "ru": "Перейти в страну",
    },
    "try_again": {
        "az": "Yenidən Cəhd Edin",
        "en": "Try Again",
        "ru": "Попробовать снова",
    },
    "validation_budget": {
        "az": "Büdcə seçmək məcburidir.",
        "en": "Budget selection is required.",
        "ru": "Выбор бюджета обязателен.",
    },
    # Templates used by the rule-based recommender
    "rule_reason": {
        "az": "{country} seçimlərinizə ən uyğun gələn ölkədir: {details}.",
        "en": "{country} is the closest match to your preferences: {details}.",
        "ru": "{country} лучше всего соответствует вашим предпочтениям: {details}.",
    },
    "rule_reason_generic": {
        "az": "{country} mövcud ölkələr arasında hərtərəfli yaxşı seçimdir.",
        "en": "{country} is a good all-round choice among the available countries.",
        "ru": "{country} является хорошим универсальным выбором среди доступных стран.",
    },
}

_TEMPLATES = {"rule_reason", "rule_reason_generic"}


_OPTIONS = {
    "budget": {
        "az": {"low": "Ekonom", "medium": "Orta", "high": "Lüks"},
        "en": {"low": "Economy", "medium": "Standard", "high": "Luxury"},
        "ru": {"low": "Эконом", "medium": "Стандарт", "high": "Люкс"},
    },
    "travel_style": {
        "az": {"adventure": "Macəra", "relax": "Sakit İstirahət", "family": "Ailəvi", "culture": "Mədəniyyət"},
        "en": {"adventure": "Adventure", "relax": "Relaxation", "family": "Family", "culture": "Cultural"},
        "ru": {"adventure": "Приключения", "relax": "Спокойный отдых", "family": "Семейный", "culture": "Культурный"},
    },
    "interests": {
        "az": {"beach": "Çimərlik", "nature": "Təbiət", "history": "Tarix", "city": "Şəhər Həyatı", "food": "Mətbəx"},
        "en": {"beach": "Beach", "nature": "Nature", "history": "History", "city": "City Life", "food": "Cuisine"},
        "ru": {"beach": "Пляж", "nature": "Природа", "history": "История", "city": "Городская жизнь", "food": "Кухня"},
    },
}
