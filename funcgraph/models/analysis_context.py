"""
Traversal context passed down the syntax tree
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class AnalysisContext:
    """Immutable per-subtree state; descend with enter_class/enter_function"""
    current_class: Optional[str] = None
    inside_function: bool = False

    def enter_class(self, class_name: str) -> 'AnalysisContext':
        return replace(self, current_class=class_name)

    def enter_function(self) -> 'AnalysisContext':
        if self.inside_function:
            return self
        return replace(self, inside_function=True)
