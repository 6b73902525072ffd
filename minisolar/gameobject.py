"""Base class for objects that own a transform and are updated each frame."""

from abc import ABC, abstractmethod

from .transform import Transform


class GameObject(ABC):
    """An object in the scene with its own Transform."""

    def __init__(self) -> None:
        self.transform = Transform()

    @abstractmethod
    def update(self) -> None:
        """Advance the object's state by one frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw the object."""