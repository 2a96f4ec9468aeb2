from __future__ import annotations

import logging
from collections import namedtuple

from .console import Console

logger = logging.getLogger(__name__)

Transition = namedtuple("Transition", ["kind", "state"])
# kind: "push" | "clean_push" | "pop" | "quit"
# state: the state to push, or None

PUSH = "push"
CLEAN_PUSH = "clean_push"
POP = "pop"
QUIT = "quit"


def push(state) -> Transition:
    return Transition(PUSH, state)


def clean_push(state) -> Transition:
    return Transition(CLEAN_PUSH, state)


def pop() -> Transition:
    return Transition(POP, None)


def quit_all() -> Transition:
    return Transition(QUIT, None)


class Engine:
    """Runs a stack of states against one console.

    Each frame the top state is updated, its transition (if any) is applied,
    and the resulting top state is rendered. The loop ends once the stack is
    empty.
    """

    def __init__(self, console: Console):
        self.console = console
        self.stack: list = []
        self.frames = 0

    @property
    def active(self):
        return self.stack[-1] if self.stack else None

    def push(self, state) -> None:
        self.stack.append(state)
        setup = getattr(state, "setup", None)
        if setup is not None:
            setup(self.console)

    def apply(self, transition: Transition | None) -> None:
        if transition is None:
            return
        logger.debug("transition %s -> %s", transition.kind, type(transition.state).__name__)
        if transition.kind == PUSH:
            self.push(transition.state)
        elif transition.kind == CLEAN_PUSH:
            self.stack.clear()
            self.push(transition.state)
        elif transition.kind == POP:
            if self.stack:
                self.stack.pop()
        elif transition.kind == QUIT:
            self.stack.clear()
        else:
            raise ValueError(f"unknown transition: {transition.kind}")

    def step(self) -> bool:
        self.apply(self.active.update(self.console))
        self.frames += 1
        if not self.stack:
            return False
        self.active.render(self.console)
        return True

    def run(self, state) -> int:
        self.push(state)
        while self.step():
            pass
        return self.frames
