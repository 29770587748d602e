from pydantic import BaseModel

from models.language import Language


class CountryRecord(BaseModel):
    name: str
    name_en: str | None = None
    name_ru: str | None = None
    slug: str

    # Only read by the rule-based recommender
    budget_level: str | None = None
    travel_styles: list[str] = []
    interests: list[str] = []

    @property
    def localized_names(self) -> dict[Language, str]:
        names = {Language.AZ: self.name}
        if self.name_en:
            names[Language.EN] = self.name_en
        if self.name_ru:
            names[Language.RU] = self.name_ru
        return names

    def display_name(self, language: Language) -> str:
        return self.localized_names.get(language, self.name)
