class MalformedPathError(ValueError):
    """Raised when a taxonomic path string starts with an empty taxon name."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Taxonomic path {text!r} has an empty leading taxon component.")

    def __reduce__(self):
        return type(self), (self.text,)
