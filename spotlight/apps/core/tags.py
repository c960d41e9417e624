class TagList:
    """Ordered tags, unique regardless of case.

    ``add`` keeps the first spelling it sees and silently drops later ones
    that differ only in case; ``remove`` needs the exact stored spelling.
    """

    def __init__(self, tags=None):
        self._tags = []
        for tag in tags or []:
            self.add(tag)

    @classmethod
    def from_text(cls, text, separator=","):
        return cls((text or "").split(separator))

    def add(self, tag):
        trimmed = str(tag or "").strip()
        if not trimmed:
            return False
        if trimmed.lower() in {existing.lower() for existing in self._tags}:
            return False
        self._tags.append(trimmed)
        return True

    def remove(self, tag):
        before = len(self._tags)
        self._tags = [existing for existing in self._tags if existing != tag]
        return len(self._tags) != before

    def as_list(self):
        return list(self._tags)

    def __iter__(self):
        return iter(self._tags)

    def __len__(self):
        return len(self._tags)

    def __contains__(self, tag):
        return str(tag).lower() in {existing.lower() for existing in self._tags}


def normalize_tags(tags):
    return TagList(tags).as_list()
