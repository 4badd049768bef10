"""Fixed table of "good morning" greetings keyed by language code."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple, Union
from pico_ioc import factory, provides
from .config import GreetingSettings
from .exceptions import DuplicateLanguageError, UnknownLanguageError

logger = logging.getLogger(__name__)

class LanguageType(str, Enum):
    EN = "EN"
    ES = "ES"
    IT = "IT"

@dataclass(frozen=True)
class GreetingEntry:
    language_code: LanguageType
    text: str

GREETINGS: Tuple[GreetingEntry, ...] = (
    GreetingEntry(LanguageType.EN, "Good morning!"),
    GreetingEntry(LanguageType.ES, "Buenos dias!"),
    GreetingEntry(LanguageType.IT, "Buongiorno!"),
)

# Languages joined by the plain /goodMorning endpoint.
MORNING_PAIR: Tuple[LanguageType, ...] = (LanguageType.EN, LanguageType.ES)

def _normalize(code: Union[str, LanguageType]) -> str:
    if isinstance(code, LanguageType):
        code = code.value
    # upper() first so dotless i and similar fold onto their ASCII codes.
    return code.upper().lower()

class GreetingRegistry:
    """Read-only, ordered collection of greeting entries.

    Lookups are case-insensitive on the language code. Unknown codes are a
    normal outcome and yield ``None`` rather than an error; callers fall back
    to :meth:`default_entry`.
    """

    def __init__(
        self,
        entries: Iterable[GreetingEntry],
        default_language: Union[str, LanguageType] = LanguageType.EN,
    ):
        self._entries: Tuple[GreetingEntry, ...] = tuple(entries)
        self._by_code = {}
        for entry in self._entries:
            key = _normalize(entry.language_code)
            if key in self._by_code:
                raise DuplicateLanguageError(entry.language_code.value)
            self._by_code[key] = entry
        default = self._by_code.get(_normalize(default_language))
        if default is None:
            raise UnknownLanguageError(str(default_language))
        self._default = default

    def entry_for(self, code: Union[str, LanguageType]) -> Optional[GreetingEntry]:
        return self._by_code.get(_normalize(code))

    def by_language(self, code: str) -> Optional[str]:
        entry = self.entry_for(code)
        if entry is None:
            logger.debug("No greeting for language %r", code)
            return None
        return entry.text

    def require(self, *codes: Union[str, LanguageType]) -> Tuple[GreetingEntry, ...]:
        """Entries for ``codes`` in the given order.

        Raises :class:`UnknownLanguageError` for the first code with no entry.
        """
        entries = []
        for code in codes:
            entry = self.entry_for(code)
            if entry is None:
                raise UnknownLanguageError(str(getattr(code, "value", code)))
            entries.append(entry)
        return tuple(entries)

    def all(self) -> Tuple[GreetingEntry, ...]:
        return self._entries

    def default_entry(self) -> GreetingEntry:
        return self._default

    def __iter__(self) -> Iterator[GreetingEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        codes = ", ".join(e.language_code.value for e in self._entries)
        return f"GreetingRegistry([{codes}], default={self._default.language_code.value})"

@factory
class GreetingRegistryFactory:
    @provides(GreetingRegistry, scope="singleton")
    def create_registry(self, settings: GreetingSettings) -> GreetingRegistry:
        registry = GreetingRegistry(GREETINGS, default_language=settings.default_language)
        registry.require(*MORNING_PAIR)
        return registry
