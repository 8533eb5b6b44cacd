"""
Keyboard capability set.

Games never read pygame key events directly. Each frame the host loop hands
them a KeyState they can ask "is key K currently held?". Held state is
level-triggered: a key reports True for every frame it stays down.
"""
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Sequence

import pygame


class Key(Enum):
    """Logical keys used by the demos, mapped to pygame key codes."""
    SPACE = pygame.K_SPACE
    LEFT = pygame.K_LEFT
    RIGHT = pygame.K_RIGHT
    PAUSE = pygame.K_p
    CONFIRM = pygame.K_RETURN
    ESCAPE = pygame.K_ESCAPE

    @property
    def code(self) -> int:
        """pygame key code for this key."""
        return self.value


class KeyState:
    """Read-only view of which keys are held during the current frame."""

    def is_pressed(self, key: Key) -> bool:
        raise NotImplementedError

    def held(self) -> FrozenSet[Key]:
        """All logical keys currently held."""
        return frozenset(k for k in Key if self.is_pressed(k))


class PygameKeyState(KeyState):
    """Snapshot of pygame's keyboard state.

    Call snapshot() once per frame after the event queue has been pumped;
    is_pressed() then answers from that snapshot so every query in a frame
    sees the same state.
    """

    def __init__(self, pressed: Optional[Sequence[bool]] = None):
        self._pressed = pressed

    def snapshot(self) -> 'PygameKeyState':
        self._pressed = pygame.key.get_pressed()
        return self

    def is_pressed(self, key: Key) -> bool:
        if self._pressed is None:
            return False
        return bool(self._pressed[key.code])


class StaticKeyState(KeyState):
    """Fixed set of held keys, for tests and scripted runs.

    Example:
        >>> keys = StaticKeyState({Key.LEFT})
        >>> keys.is_pressed(Key.LEFT), keys.is_pressed(Key.RIGHT)
        (True, False)
    """

    def __init__(self, held: Iterable[Key] = ()):
        self._held = frozenset(held)

    def is_pressed(self, key: Key) -> bool:
        return key in self._held

    def held(self) -> FrozenSet[Key]:
        return self._held

    def __repr__(self) -> str:
        names = ', '.join(sorted(k.name for k in self._held))
        return f"StaticKeyState({{{names}}})"


NO_KEYS = StaticKeyState()
