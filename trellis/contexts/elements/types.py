"""Enumerated attribute values. Each member serializes as its value."""

from enum import Enum


class Capitalization(Enum):
    OFF = "off"
    NONE = "none"
    ON = "on"
    SENTENCES = "sentences"
    WORDS = "words"
    CHARACTERS = "characters"


class Direction(Enum):
    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"
    AUTO = "auto"


class Hint(Enum):
    ENTER = "enter"
    DONE = "done"
    GO = "go"
    NEXT = "next"
    PREVIOUS = "previous"
    SEARCH = "search"
    SEND = "send"


class Decision(Enum):
    YES = "yes"
    NO = "no"


class Language(Enum):
    ARABIC = "ar"
    CHINESE = "zh"
    DUTCH = "nl"
    ENGLISH = "en"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    JAPANESE = "ja"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SPANISH = "es"


class Roles(Enum):
    ALERT = "alert"
    BANNER = "banner"
    BUTTON = "button"
    COMPLEMENTARY = "complementary"
    CONTENT_INFO = "contentinfo"
    DIALOG = "dialog"
    FORM = "form"
    HEADING = "heading"
    IMG = "img"
    LINK = "link"
    LIST = "list"
    LIST_ITEM = "listitem"
    MAIN = "main"
    NAVIGATION = "navigation"
    NONE = "none"
    PRESENTATION = "presentation"
    REGION = "region"
    SEARCH = "search"
    STATUS = "status"
    TAB = "tab"
    TAB_LIST = "tablist"
    TAB_PANEL = "tabpanel"
