class UnsupportedCharacter(ValueError):
    """
    Raised when a character has no ASCII-art glyph.
    """
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Invalid character in timer: {char!r}")


class PromptAborted(Exception):
    """
    Raised when the user leaves a duration prompt (Ctrl+C / Ctrl+D).
    """
