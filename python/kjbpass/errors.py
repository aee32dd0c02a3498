"""Exceptions raised by kjbpass."""


class KJBPassError(Exception):
    """Base class for kjbpass errors."""


class CorpusError(KJBPassError):
    """The word corpus could not be loaded.

    Passwords cannot be generated without a corpus, so this is fatal
    for the caller.
    """

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load word corpus {path}: {reason}")
