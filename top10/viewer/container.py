class DisplayContainer:
    """The element whose inner markup shows the leaderboard rows"""

    __slots__ = ('element_id', 'content')

    def __init__(self, element_id: str, content: str = ""):
        self.element_id = element_id
        self.content = content

    def replace_content(self, markup: str):
        self.content = markup

    def __repr__(self):
        return f"DisplayContainer(element_id={self.element_id!r}, content={self.content!r})"
