"""
Logical player actions and the held-key state the simulation reads
"""

from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    FORWARD = "forward"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    FIRE = "fire"  # discrete, never held


@dataclass
class InputState:
    """Pressed/released flags for the held actions"""
    forward: bool = False
    rotate_left: bool = False
    rotate_right: bool = False

    def set(self, action: Action, pressed: bool):
        if action is Action.FORWARD:
            self.forward = pressed
        elif action is Action.ROTATE_LEFT:
            self.rotate_left = pressed
        elif action is Action.ROTATE_RIGHT:
            self.rotate_right = pressed
        else:
            raise ValueError(f"{action} is not a held action")

    def reset(self):
        self.forward = False
        self.rotate_left = False
        self.rotate_right = False
