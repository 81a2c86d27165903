from typing import Union

class PlayerRec:
    __slots__ = ('id', 'name', 'score')
    def __init__(self, id: int, name: str, score: int):
        self.id = id
        self.name = name
        self.score = int(score)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'score': self.score
        }

class RenderedRow:
    __slots__ = ('rank', 'name', 'score')
    def __init__(self, rank: int, name: str, score: Union[int, float]):
        self.rank = rank
        self.name = name
        self.score = score

    def __eq__(self, other):
        if not isinstance(other, RenderedRow):
            return NotImplemented
        return (self.rank, self.name, self.score) == (other.rank, other.name, other.score)

    def __repr__(self):
        return f"RenderedRow(rank={self.rank}, name={self.name!r}, score={self.score!r})"
