from enum import Enum


class Language(str, Enum):
    AZ = "az"
    EN = "en"
    RU = "ru"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Language.AZ: "Azerbaijani",
    Language.EN: "English",
    Language.RU: "Russian",
}
