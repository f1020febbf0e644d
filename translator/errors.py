class TranslationError(Exception):
    """Base class for everything the translator refuses to process."""


class InvalidModel(TranslationError):
    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"Invalid model tag: {tag!r} (expected ';S' or ';I')")


class MalformedTransitionLine(TranslationError):
    def __init__(self, line_number, line, reason):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: {line!r}")
