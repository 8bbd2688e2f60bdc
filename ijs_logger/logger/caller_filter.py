"""
caller_filter.py
----------------
Finds the "real" callers of a log call by walking the stack and skipping
frames that belong to framework plumbing.

Responsibilities
----------------
- Resolve live frames into (type name, method name) pairs.
- Exclude frames by exact method name, exact type name or exact pair.
- Return the nearest surviving frames for attribution.
"""

import sys
from dataclasses import dataclass, field
from itertools import islice
from typing import Callable, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from ijs_logger.core.debug.debug_logger import DebugLogger
from ijs_logger.core.runtime.logger_settings import Attribution


UNKNOWN = "<unknown>"


# ===========================================================
# Stack Frame
# ===========================================================

@dataclass(frozen=True)
class StackFrame:
    """One call-stack entry reduced to its declaring type and method."""
    type_name: str = UNKNOWN
    method_name: str = UNKNOWN

    @property
    def is_resolved(self) -> bool:
        return self.type_name != UNKNOWN and self.method_name != UNKNOWN

    @classmethod
    def from_frame(cls, frame) -> "StackFrame":
        """Resolve a live interpreter frame."""
        code = getattr(frame, "f_code", None)
        method = getattr(code, "co_name", None) or UNKNOWN
        return cls(_declaring_type(frame, code) or UNKNOWN, method)


def _declaring_type(frame, code) -> Optional[str]:
    """Owner of the code object: qualname owner, then self/cls, then module."""
    qualname = getattr(code, "co_qualname", None)
    if qualname:
        owner = qualname.split(".")[:-1]
        if owner:
            return owner[-1]

    f_locals = getattr(frame, "f_locals", None) or {}

    # Instance method
    if "self" in f_locals:
        return f_locals["self"].__class__.__name__

    # Classmethod
    if "cls" in f_locals and isinstance(f_locals["cls"], type):
        return f_locals["cls"].__name__

    module = (getattr(frame, "f_globals", None) or {}).get("__name__")
    if module:
        return module.rsplit(".", 1)[-1]
    return None


# ===========================================================
# Exclusion Rules
# ===========================================================

DEFAULT_METHOD_NAMES = frozenset({
    # asyncio event loop and task stepping
    "_run_once",
    "run_forever",
    "run_until_complete",
    "__step",
    "__step_run_and_handle_result",
    "__wakeup",
    "_run_callbacks",
    "_invoke_callbacks",
    # Code objects without a useful name
    "<lambda>",
    "<genexpr>",
    "<listcomp>",
    "<dictcomp>",
    "<setcomp>",
})

DEFAULT_TYPE_NAMES = frozenset({
    # Logging layer
    "PrefixedLogger",
    "CallerAttributionFilter",
    "ExclusionRules",
    # asyncio internals
    "Task",
    "Future",
    "BaseEventLoop",
    "BaseSelectorEventLoop",
    "_UnixSelectorEventLoop",
    "ProactorEventLoop",
    "_SelectorTransport",
    "_SelectorSocketTransport",
    "StreamReaderProtocol",
    # Socket internals
    "socket",
    "SocketIO",
    "BaseServer",
    # Tween and UI click plumbing
    "Tween",
    "Tweener",
    "TweenManager",
    "UIButton",
    "UIManager",
    # Nested function scopes
    "<locals>",
})

DEFAULT_PAIRS = frozenset({
    ("Handle", "_run"),
    ("Context", "run"),
    ("Runner", "run"),
    ("Thread", "run"),
    ("Thread", "_bootstrap_inner"),
    ("_WorkItem", "run"),
    ("partial", "__call__"),
})


@dataclass(frozen=True)
class ExclusionRules:
    """
    Exact-match exclusion sets. Instances are callable predicates returning
    True for frames that should be skipped.
    """

    method_names: FrozenSet[str] = field(default_factory=frozenset)
    type_names: FrozenSet[str] = field(default_factory=frozenset)
    pairs: FrozenSet[Tuple[str, str]] = field(default_factory=frozenset)

    def __call__(self, frame: StackFrame) -> bool:
        return (frame.method_name in self.method_names
                or frame.type_name in self.type_names
                or (frame.type_name, frame.method_name) in self.pairs)

    @classmethod
    def default(cls) -> "ExclusionRules":
        return cls(DEFAULT_METHOD_NAMES, DEFAULT_TYPE_NAMES, DEFAULT_PAIRS)

    def extended(self, method_names: Iterable[str] = (), type_names: Iterable[str] = (),
                 pairs: Iterable[Tuple[str, str]] = ()) -> "ExclusionRules":
        """Return a copy with extra entries added."""
        return ExclusionRules(
            self.method_names | frozenset(method_names),
            self.type_names | frozenset(type_names),
            self.pairs | frozenset(tuple(p) for p in pairs),
        )

    @classmethod
    def from_config(cls, config: Optional[dict]) -> "ExclusionRules":
        """
        Default rules extended by a config mapping.

        Keys: ``methods``, ``types`` and ``pairs`` (each pair a two-item
        list). A true ``replace_defaults`` key starts from empty sets.
        """
        config = config or {}
        base = cls() if config.get("replace_defaults") else cls.default()
        return base.extended(
            _name_list(config, "methods"),
            _name_list(config, "types"),
            config.get("pairs", ()) or (),
        )


def _name_list(config: dict, key: str) -> List[str]:
    """Read a list of names, accepting a single bare name as well."""
    value = config.get(key) or ()
    if isinstance(value, str):
        DebugLogger.warn(f"Exclusion '{key}' should be a list, got a single name: {value!r}",
                         category="loading")
        return [value]
    return list(value)


# ===========================================================
# Caller Attribution Filter
# ===========================================================

class CallerAttributionFilter:
    """Walks the stack innermost-first and yields non-excluded frames."""

    def __init__(self, exclude: Optional[Callable[[StackFrame], bool]] = None):
        """
        Args:
            exclude: Predicate returning True for frames to skip.
                     Defaults to ExclusionRules.default().
        """
        self.exclude = exclude if exclude is not None else ExclusionRules.default()

    @staticmethod
    def walk(frame) -> Iterator[StackFrame]:
        """Lazily resolve a live frame and its callers, innermost first."""
        while frame is not None:
            yield StackFrame.from_frame(frame)
            frame = frame.f_back

    def filter(self, frames: Iterable[StackFrame]) -> Iterator[StackFrame]:
        """Lazily drop excluded frames, preserving order."""
        for frame in frames:
            if not self.exclude(frame):
                yield frame

    def nearest_callers(self, frames: Optional[Iterable[StackFrame]] = None,
                        count: int = Attribution.CALLER_COUNT) -> List[StackFrame]:
        """
        First ``count`` surviving frames; fewer when the stack runs out.

        Args:
            frames: Frames to filter, innermost first. Defaults to the live
                    stack of the caller.
            count: Number of callers wanted
        """
        if frames is None:
            frames = self.walk(sys._getframe(1))
        return list(islice(self.filter(frames), count))
