"""
Learning bounded context - Domain layer.

This context holds the learning progress and assessment engine:
- Progress aggregation per module and per learner
- Calendar-aware study streak
- Review and flashcard scheduling
- Quiz generation and the quiz session state machine

Aggregates:
- Module: thematic grouping whose progress is a projection of its vocabulary
- UserProgress: learner-wide totals, one per installation
"""
