"""
Domain service deriving progress figures from vocabulary state.

This is a pure domain service with no infrastructure dependencies. Every
figure is recomputed from the snapshot it is given; nothing is cached here.
"""

from collections.abc import Iterable, Sequence

from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.module import Module
from lexitrack.domain.learning.entities.vocabulary_item import VocabularyItem
from lexitrack.domain.learning.value_objects import ModuleProgress


def percentage(part: int, whole: int) -> int:
    """Integer percentage rounded half up; 0 for an empty whole."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


class ProgressAggregator:
    """Computes module- and learner-level progress from a vocabulary snapshot."""

    def compute_module_progress(
        self, module_id: ModuleId, all_items: Iterable[VocabularyItem]
    ) -> ModuleProgress:
        """
        Derive a module's progress projection.

        Never fails: a module without vocabulary is at 0%.

        Args:
            module_id: The module to compute
            all_items: Full vocabulary snapshot, any module

        Returns:
            ModuleProgress with progress, completed and the underlying counts
        """
        total = 0
        learned = 0
        for item in all_items:
            if item.module_id != module_id:
                continue
            total += 1
            if item.learned:
                learned += 1

        progress = percentage(learned, total)
        return ModuleProgress(
            progress=progress,
            completed=progress == 100,
            learned_count=learned,
            total_count=total,
        )

    def compute_user_totals(self, all_items: Iterable[VocabularyItem]) -> int:
        """Number of learned items across every module."""
        return sum(1 for item in all_items if item.learned)

    def overall_progress(self, modules: Sequence[Module]) -> int:
        """Rounded mean of module progress; 0 when there are no modules."""
        return percentage(sum(module.progress for module in modules), 100 * len(modules))

    def learning_goal_percentage(self, total_learned: int, goal: int) -> int:
        """Progress towards a target vocabulary size, capped at 100."""
        return min(percentage(total_learned, goal), 100)

    def next_module_to_study(self, modules: Sequence[Module]) -> Module | None:
        """First module in study order that is not finished yet."""
        for module in sorted(modules, key=lambda m: m.order):
            if module.progress < 100:
                return module
        return None

    def modules_by_level(self, modules: Sequence[Module]) -> dict[str, list[Module]]:
        """Group modules by level, each group in study order."""
        grouped: dict[str, list[Module]] = {}
        for module in modules:
            grouped.setdefault(module.level, []).append(module)
        for level_modules in grouped.values():
            level_modules.sort(key=lambda m: m.order)
        return grouped
