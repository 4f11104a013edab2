"""Data structures describing a parsed React component."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PropDefinition:
    """A component prop with its type, default value and optionality."""

    name: str
    type: str = "any"
    default_value: str = ""
    optional: bool = False


@dataclass
class StateDefinition:
    """A piece of state declared with ``useState``."""

    name: str
    initial_value: str = ""
    type: str = "any"


@dataclass
class EffectDefinition:
    """A ``useEffect`` hook: its body and dependency list."""

    body: str = ""
    dependencies: list[str] = field(default_factory=list)


@dataclass
class FunctionDefinition:
    """A helper function declared inside the component source."""

    name: str
    body: str = ""
    params: str = ""
    is_async: bool = False


@dataclass
class ReactComponent:
    """Everything extracted from a React component's source."""

    name: str = ""
    props: list[PropDefinition] = field(default_factory=list)
    states: list[StateDefinition] = field(default_factory=list)
    effects: list[EffectDefinition] = field(default_factory=list)
    functions: list[FunctionDefinition] = field(default_factory=list)
    jsx_content: str = ""
    imports: list[str] = field(default_factory=list)