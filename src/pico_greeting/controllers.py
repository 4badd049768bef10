from .decorators import controller, get
from .registry import MORNING_PAIR, GreetingRegistry
from .responses import ServiceResponse


@controller(prefix="/api/greeting", tags=["Greetings"])
class GreetingController:
    """Greeting endpoints backed by the shared :class:`GreetingRegistry`."""

    def __init__(self, registry: GreetingRegistry):
        self.registry = registry

    @get("/goodMorning")
    async def good_morning(self):
        """English and Spanish greetings joined with ``"; "``."""
        return "; ".join(entry.text for entry in self.registry.require(*MORNING_PAIR))

    # Must stay above native_good_morning so "all" is not taken as a language.
    @get("/goodMorning/all")
    async def all_good_mornings(self):
        return ServiceResponse.now([entry.text for entry in self.registry.all()])

    @get("/goodMorning/{lang}")
    async def native_good_morning(self, lang: str):
        """Greeting for ``lang``, or the default language when unknown."""
        text = self.registry.by_language(lang)
        if text is None:
            return self.registry.default_entry().text
        return text
