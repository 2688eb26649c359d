"""Image metadata attached to a recipe. The binary content lives in the store."""
from typing import Optional
from kochbuch.utilities.validators import ImageInput, parse_model


class Image:
    def __init__(self, name: str = "", width: int = 0, height: int = 0,
                 type: str = "", size: int = 0, src: Optional[str] = None):
        self.name = name
        self.width = width
        self.height = height
        self.type = type
        self.size = size
        self.src = src

    def __eq__(self, other) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.name, self.width, self.height, self.type, self.size))

    def __str__(self) -> str:
        return f"{self.name} ({self.width}x{self.height})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        parsed = parse_model(ImageInput, data)
        return Image(**parsed.model_dump())

    def to_dict(self):
        d = {
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "type": self.type,
            "size": self.size,
        }
        # src only travels on upload; stored images are fetched by name
        if self.src is not None:
            d["src"] = self.src
        return d
