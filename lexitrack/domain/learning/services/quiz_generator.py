"""
Domain service synthesizing a module quiz from its vocabulary pool.

This is a pure domain service: it returns unsaved questions. Replacing a
module's previous quiz is the caller's job.
"""

from collections.abc import Sequence

from lexitrack.domain.common.exceptions import InsufficientDataError
from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.quiz_question import (
    AUDIO,
    FILL_IN_BLANK,
    MULTIPLE_CHOICE,
    QuizQuestion,
)
from lexitrack.domain.learning.entities.vocabulary_item import VocabularyItem
from lexitrack.domain.learning.services.randomness import RandomSource

DISTRACTOR_COUNT = 3
MIN_POOL_SIZE = DISTRACTOR_COUNT + 1

MULTIPLE_CHOICE_COUNT = 5
FILL_IN_BLANK_COUNT = 3
FILL_IN_BLANK_OFFSET = 5
AUDIO_COUNT = 2
AUDIO_OFFSET = 8

MULTIPLE_CHOICE_PROMPT = "Translate: {source}"
FILL_IN_BLANK_PROMPT = "Complete: ___ ({target})"
AUDIO_PROMPT = 'Listen and write: (audio: "{source}")'


def window_index(position: int, offset: int, pool_size: int) -> int:
    """
    Index of the item used for the `position`-th question of a window.

    Windows start at `offset`; positions that would fall past the end of
    the pool wrap back to the start of the pool. For small pools the same
    item can therefore appear in several question types.
    """
    shifted = position + offset
    return shifted if shifted < pool_size else position


class QuizGenerator:
    """
    Builds multiple-choice, fill-in-blank and audio questions.

    Question layout for a pool of n items, in order:
    - multiple-choice for items 0..min(5, n)-1
    - fill-in-blank for items 5..7 (wrapping to the start)
    - audio for items 8..9 (wrapping to the start)
    """

    def generate_quiz(
        self,
        module_id: ModuleId,
        pool: Sequence[VocabularyItem],
        random_source: RandomSource,
    ) -> list[QuizQuestion]:
        """
        Generate a full quiz for a module.

        Args:
            module_id: Module the questions belong to
            pool: The module's vocabulary, in study order
            random_source: Picks distractors and shuffles options

        Returns:
            Unsaved questions, multiple-choice first

        Raises:
            InsufficientDataError: If the pool has fewer than four items
        """
        if len(pool) < MIN_POOL_SIZE:
            raise InsufficientDataError(available=len(pool), required=MIN_POOL_SIZE)

        questions = [
            self._multiple_choice(module_id, pool, index, random_source)
            for index in range(min(MULTIPLE_CHOICE_COUNT, len(pool)))
        ]

        for position in range(min(FILL_IN_BLANK_COUNT, len(pool))):
            item = pool[window_index(position, FILL_IN_BLANK_OFFSET, len(pool))]
            questions.append(
                QuizQuestion.create(
                    module_id=module_id,
                    type=FILL_IN_BLANK,
                    prompt=FILL_IN_BLANK_PROMPT.format(target=item.target_text),
                    correct_answer=item.source_text,
                )
            )

        for position in range(min(AUDIO_COUNT, len(pool))):
            item = pool[window_index(position, AUDIO_OFFSET, len(pool))]
            questions.append(
                QuizQuestion.create(
                    module_id=module_id,
                    type=AUDIO,
                    prompt=AUDIO_PROMPT.format(source=item.source_text),
                    correct_answer=item.source_text,
                )
            )

        return questions

    def pick_distractors(
        self,
        correct: VocabularyItem,
        pool: Sequence[VocabularyItem],
        random_source: RandomSource,
    ) -> list[str]:
        """
        Sample wrong options for a multiple-choice question.

        Candidates exclude the correct item itself and any item whose
        translation reads the same as the correct answer, and each
        translation is offered at most once.
        """
        seen = {correct.target_text}
        candidates: list[str] = []
        for item in pool:
            if item is correct or (item.id == correct.id and not item.id.is_transient):
                continue
            if item.target_text in seen:
                continue
            seen.add(item.target_text)
            candidates.append(item.target_text)
        return random_source.sample(candidates, min(DISTRACTOR_COUNT, len(candidates)))

    def _multiple_choice(
        self,
        module_id: ModuleId,
        pool: Sequence[VocabularyItem],
        index: int,
        random_source: RandomSource,
    ) -> QuizQuestion:
        correct = pool[index]
        distractors = self.pick_distractors(correct, pool, random_source)
        options = random_source.shuffle([*distractors, correct.target_text])
        return QuizQuestion.create(
            module_id=module_id,
            type=MULTIPLE_CHOICE,
            prompt=MULTIPLE_CHOICE_PROMPT.format(source=correct.source_text),
            correct_answer=correct.target_text,
            options=options,
        )
