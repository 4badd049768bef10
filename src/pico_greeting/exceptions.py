class PicoGreetingError(Exception):
    pass

class InvalidConfigurerError(PicoGreetingError):
    def __init__(self, obj: object):
        super().__init__(f"Object does not implement FastApiConfigurer.configure(app): {obj!r}")

class NoControllersFoundError(PicoGreetingError):
    def __init__(self):
        super().__init__("No controllers were registered. Ensure your controller modules are scanned.")

class DuplicateLanguageError(PicoGreetingError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Language code registered more than once: {code!r}")

class UnknownLanguageError(PicoGreetingError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"No greeting registered for language code: {code!r}")
